"""Multilinear interpolation on rectilinear grids."""

from __future__ import annotations

import sys
from bisect import bisect_right
from enum import Enum
from itertools import product
from math import prod
from typing import Sequence

_EPSILON = sys.float_info.epsilon


class Order(Enum):
    """Layout of the flattened data array."""

    NATURAL = "natural"
    """Row-major: the last axis varies fastest."""
    REVERSED = "reversed"
    """Column-major: the first axis varies fastest."""

    def flat_index(self, shape: Sequence[int], indices: Sequence[int]) -> int:
        """Map per-axis indices to a position in the flattened data."""
        if len(shape) != len(indices):
            raise ValueError("indices must have one entry per axis")
        pairs = list(zip(shape, indices))
        if self is Order.NATURAL:
            pairs.reverse()
        index = 0
        stride = 1
        for size, i in pairs:
            index += i * stride
            stride *= size
        return index


def _locate(grid: Sequence[float], x: float) -> tuple[int, float]:
    """Return the left cell index and the weight of its left corner."""
    size = len(grid)
    if size == 1 or x <= grid[0]:
        return 0, 1.0
    if x >= grid[-1]:
        return size - 2, 0.0
    mid = bisect_right(grid, x) - 1
    left, right = grid[mid], grid[mid + 1]
    return mid, (right - x) / (right - left)


def interp(
    shape: Sequence[int],
    yd: Sequence[float],
    grids: Sequence[Sequence[float]],
    points: Sequence[Sequence[float]],
    order: Order = Order.NATURAL,
) -> list[float]:
    """Interpolate gridded data at the given points.

    ``grids`` holds the increasing tick values of each axis and ``points``
    holds, for each axis, the coordinates of every query point. Points
    outside the grid take the value at the nearest boundary.
    """
    dimension = len(shape)
    if dimension == 0:
        raise ValueError("at least one axis is required")
    if any(size <= 0 for size in shape):
        raise ValueError("every axis needs at least one point")
    if len(grids) != dimension or len(points) != dimension:
        raise ValueError("grids and points must have one entry per axis")
    for size, grid in zip(shape, grids):
        if len(grid) != size:
            raise ValueError("grid length does not match shape")
    if len(yd) != prod(shape):
        raise ValueError("data length does not match shape")
    counts = {len(axis) for axis in points}
    if len(counts) > 1:
        raise ValueError("all axes must give the same number of points")

    corners = list(product((True, False), repeat=dimension))
    result = []
    for coords in zip(*points):
        cells = [_locate(grid, x) for grid, x in zip(grids, coords)]
        value = 0.0
        for corner in corners:
            factor = 1.0
            indices = []
            for (mid, weight), left in zip(cells, corner):
                if left:
                    indices.append(mid)
                    factor *= weight
                else:
                    indices.append(mid + 1)
                    factor *= 1.0 - weight
            if factor > _EPSILON:
                value += factor * yd[order.flat_index(shape, indices)]
        result.append(value)
    return result