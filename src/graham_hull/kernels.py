"""
Numba-compiled loops behind the Graham scan.

No fastmath here: the angular sort depends on exact floating-point ties
between collinear points.
"""

from __future__ import annotations

import numpy as np
from numba import njit
from numba import prange


@njit(parallel=True)
def polar_angles(points, pivot_x, pivot_y):
    """
    atan2 of every point seen from the pivot.

    With the pivot being the lowest point all angles land in [0, pi];
    the pivot itself and its duplicates get 0.
    """
    n = points.shape[0]
    angles = np.empty(n, dtype=np.float64)
    for i in prange(n):
        angles[i] = np.arctan2(points[i, 1] - pivot_y, points[i, 0] - pivot_x)
    return angles


@njit(parallel=True)
def distances_sq(points, pivot_x, pivot_y):
    """Squared distance of every point to the pivot, the tie-break key for equal angles."""
    n = points.shape[0]
    distances = np.empty(n, dtype=np.float64)
    for i in prange(n):
        dx = points[i, 0] - pivot_x
        dy = points[i, 1] - pivot_y
        distances[i] = dx * dx + dy * dy
    return distances


@njit
def graham_stack(sorted_points: np.ndarray) -> np.ndarray:
    """
    Execute the Graham scan stack sweep on pre-sorted points.

    The first row must be the pivot, the rest in (angle, distance) order.
    A candidate pops the top of the stack while the stack holds at least
    two points and (second-from-top, top, candidate) is not a strict
    counter-clockwise turn, so collinear points are popped too.

    Args:
        sorted_points: (N, 2) array, pivot first, sorted by polar angle.

    Returns:
        (H,) array of row indices into ``sorted_points`` giving the hull
        vertices in counter-clockwise order.
    """
    n = sorted_points.shape[0]
    stack = np.empty(n, dtype=np.int64)
    size = 0
    for i in range(n):
        while size >= 2:
            a = stack[size - 2]
            b = stack[size - 1]
            cross = (
                (sorted_points[b, 0] - sorted_points[a, 0])
                * (sorted_points[i, 1] - sorted_points[a, 1])
                - (sorted_points[b, 1] - sorted_points[a, 1])
                * (sorted_points[i, 0] - sorted_points[a, 0])
            )
            if cross <= 0:
                size -= 1
            else:
                break
        stack[size] = i
        size += 1
    return stack[:size].copy()
