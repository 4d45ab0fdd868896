"""Simulated transmission channels for modem samples."""

from __future__ import annotations

import math
import random
from typing import Sequence

from .interp import interp


def apply_timing_offset(timing_offset: float, samples: Sequence[float]) -> list[float]:
    """Resample ``samples`` as if read with a clock scaled by ``timing_offset``."""
    if timing_offset <= 0:
        raise ValueError("timing offset must be positive")
    count = len(samples)
    if count < 2:
        raise ValueError("at least two samples are required")
    out_count = int((count - 1) / timing_offset) + 1
    grid = [i / (count - 1) for i in range(count)]
    points = [timing_offset * i / (count - 1) for i in range(out_count)]
    return interp((count,), samples, [grid], [points])


def awgn_channel(
    rng: random.Random,
    noise_amplitude: float,
    timing_offset: float,
    samples: Sequence[float],
) -> list[float]:
    """Add white Gaussian noise of the given deviation, then apply the offset."""
    noisy = [s + rng.gauss(0.0, noise_amplitude) for s in samples]
    return apply_timing_offset(timing_offset, noisy)


def signal_avg_power(samples: Sequence[float]) -> float:
    """Mean of the squared samples; zero for no samples."""
    count = len(samples)
    return sum(s * s / count for s in samples)


def awgn_channel_eb_n0_db(
    rng: random.Random,
    eb_n0_db: float,
    timing_offset: float,
    samples: Sequence[float],
    samples_per_symbol: int,
) -> list[float]:
    """Apply an AWGN channel whose noise level is set by Eb/N0 in decibels.

    One bit is carried per symbol, so Eb equals Es.
    """
    snr_db = eb_n0_db - 10.0 * math.log10(0.5 * samples_per_symbol)
    noise_power = signal_avg_power(samples) * 10.0 ** (-snr_db / 10.0)
    return awgn_channel(rng, math.sqrt(noise_power), timing_offset, samples)


def bs_transition_channel(
    rng: random.Random,
    flip_probability: float,
    samples_affected_on_transition: int,
    timing_offset: float,
    samples: Sequence[int],
) -> list[int]:
    """Binary channel that may flip samples right after each level transition."""
    count = len(samples)
    if count < 2:
        raise ValueError("at least two samples are required")
    levels = [float(s) for s in samples]
    previous = samples[0]
    i = 0
    while i < count:
        if samples[i] != previous and samples_affected_on_transition > 0:
            end = min(i + samples_affected_on_transition, count)
            for j in range(i, end):
                if rng.random() < flip_probability:
                    levels[j] = float(not samples[j])
                else:
                    levels[j] = float(samples[j])
            i = end - 1
        previous = samples[i]
        i += 1
    resampled = apply_timing_offset(timing_offset, levels)
    return [int(v > 0.5) for v in resampled]