"""Simulated modem transmission channels and multilinear interpolation."""

__version__ = "0.1.0"
__all__ = ["channel", "interp"]