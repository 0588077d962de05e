"""
Geometric primitives shared by the hull computer, the renderer and the shell.

Points are immutable and behave like ``(x, y)`` tuples so they can be fed
straight into NumPy or unpacked. The turn test is the only predicate the
Graham scan relies on; the hull checks built on it are used to validate
results from the command line and in tests.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from enum import IntEnum

import numpy as np


class Orientation(IntEnum):
    """
    Orientation of an ordered triplet of points.

    Integer values allow direct comparison and pattern matching.
    """

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


@dataclass(slots=True, frozen=True)
class Point:
    """
    Immutable 2D point with optional original index tracking.

    Supports tuple-like access via iteration and indexing. Equality and
    ordering only consider the coordinates; ``index`` is bookkeeping.

    Attributes:
        x: X-coordinate.
        y: Y-coordinate.
        index: Position in the caller's sequence, -1 if untracked.
    """

    x: float
    y: float
    index: int = field(default=-1, compare=False)

    def __iter__(self):
        """Enable tuple unpacking: x, y = point."""
        return iter((self.x, self.y))

    def __getitem__(self, idx: int) -> float:
        """Enable indexing: point[0] returns x, point[1] returns y."""
        return (self.x, self.y)[idx]

    def __len__(self) -> int:
        return 2

    def __sub__(self, other: Point) -> tuple[float, float]:
        """Vector subtraction returning (dx, dy) tuple."""
        return (self.x - other.x, self.y - other.y)

    def distance_sq(self, other: Point) -> float:
        """Compute squared Euclidean distance to another point."""
        dx, dy = self - other
        return dx * dx + dy * dy

    def angle_from(self, origin: Point) -> float:
        """Compute polar angle from origin to this point."""
        return math.atan2(self.y - origin.y, self.x - origin.x)

    @classmethod
    def from_array(cls, arr, index: int = -1) -> Point:
        """Construct Point from numpy array or sequence."""
        return cls(float(arr[0]), float(arr[1]), index)


def as_point(value, index: int = -1) -> Point:
    if isinstance(value, Point):
        return value
    return Point.from_array(value, index)


def points_to_array(points: Iterable) -> np.ndarray:
    """
    Pack a sequence of points or ``(x, y)`` pairs into an (N, 2) array.

    Always returns a fresh array, so callers may reorder it freely.

    Raises:
        ValueError: If the input cannot be read as 2D points.
    """
    arr = np.array([tuple(p) for p in points], dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected 2D points, got array of shape {arr.shape}")
    return arr


def cross(a, b, c) -> float:
    """
    Z-component of (b - a) x (c - a).

    Positive for a strict counter-clockwise turn a -> b -> c, zero when the
    three points are collinear, negative for a clockwise turn.
    """
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def is_ccw(a, b, c) -> bool:
    return cross(a, b, c) > 0


def orientation(a, b, c) -> Orientation:
    val = cross(a, b, c)
    if val > 0:
        return Orientation.COUNTERCLOCKWISE
    if val < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR


def is_strictly_convex(hull: Sequence) -> bool:
    """
    Check that every consecutive triple of the closed polygon turns left.

    The wraparound triples (last, first, second) and (second-to-last,
    last, first) are included. Fewer than three vertices never qualify.
    """
    n = len(hull)
    if n < 3:
        return False
    return all(
        is_ccw(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) for i in range(n)
    )


def encloses(hull: Sequence, points: Iterable) -> bool:
    """
    Test that every point lies inside or on a counter-clockwise polygon.

    Uses the sidedness test: each point must have a non-negative cross
    product against every directed hull edge.
    """
    n = len(hull)
    if n < 3:
        return False
    edges = [(hull[i], hull[(i + 1) % n]) for i in range(n)]
    return all(cross(a, b, p) >= 0 for p in points for a, b in edges)


def covers_segment(hull: Sequence, points: Iterable) -> bool:
    """
    Test that a two-vertex hull spans every point.

    All-collinear input reduces to its two extreme points; every point must
    then be collinear with them and lie between them.
    """
    if len(hull) != 2:
        return False
    a, b = hull
    lo_x, hi_x = sorted((a[0], b[0]))
    lo_y, hi_y = sorted((a[1], b[1]))
    return all(
        cross(a, b, p) == 0 and lo_x <= p[0] <= hi_x and lo_y <= p[1] <= hi_y
        for p in points
    )
