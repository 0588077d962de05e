"""
Graham Scan Convex Hull Algorithm - Object-Oriented Implementation

Picks the lowest point as pivot, sorts the remaining points by polar angle
around it (nearer first on ties), then sweeps them with a stack that only
keeps strict counter-clockwise turns. The numeric loops are compiled with
Numba; sorting is done on an index array so the caller's points are never
reordered.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field

import numpy as np

from graham_hull.config import CFG
from graham_hull.geometry import Point
from graham_hull.geometry import as_point
from graham_hull.geometry import points_to_array
from graham_hull.kernels import distances_sq
from graham_hull.kernels import graham_stack
from graham_hull.kernels import polar_angles
from graham_hull.preprocess import InteriorPointFilter
from graham_hull.preprocess import Preprocessor

logger = logging.getLogger(__name__)


@dataclass
class PointCloud:
    """
    Container for 2D point data with lazy-computed geometric properties.

    Encapsulates the input point array and provides cached access to
    pivot point, polar angles, and distances. Properties are computed
    on first access and memoized for subsequent calls.

    Attributes:
        points: (N, 2) contiguous array of point coordinates.
    """

    points: np.ndarray
    _pivot_idx: int | None = field(default=None, init=False, repr=False)
    _angles: np.ndarray | None = field(default=None, init=False, repr=False)
    _distances: np.ndarray | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Ensure contiguous float64 layout and a 2D point shape."""
        self.points = np.ascontiguousarray(self.points, dtype=np.float64)
        if self.points.size == 0:
            self.points = self.points.reshape(0, 2)
        if self.points.ndim != 2 or self.points.shape[1] != 2:
            raise ValueError(
                f"Points must be an (N, 2) array, got shape {self.points.shape}"
            )

    def __len__(self) -> int:
        """Return number of points in the cloud."""
        return len(self.points)

    def __getitem__(self, idx: int | np.ndarray) -> np.ndarray:
        """Index into points array directly."""
        return self.points[idx]

    @property
    def pivot_idx(self) -> int:
        """
        Index of the pivot point (minimum y, then minimum x for ties).

        The pivot is guaranteed to be on the convex hull and serves as
        the origin for polar angle sorting.
        """
        if self._pivot_idx is None:
            self._pivot_idx = int(
                np.lexsort((self.points[:, 0], self.points[:, 1]))[0]
            )
        return self._pivot_idx

    @property
    def pivot(self) -> np.ndarray:
        """Coordinates of the pivot point as (x, y) array."""
        return self.points[self.pivot_idx]

    @property
    def angles(self) -> np.ndarray:
        """Polar angles from pivot to all points."""
        if self._angles is None:
            self._angles = polar_angles(self.points, self.pivot[0], self.pivot[1])
        return self._angles

    @property
    def distances(self) -> np.ndarray:
        """Squared distances from pivot to all points."""
        if self._distances is None:
            self._distances = distances_sq(self.points, self.pivot[0], self.pivot[1])
        return self._distances

    def polar_order(self, candidates: np.ndarray | None = None) -> np.ndarray:
        """
        Order candidate indices by polar angle around the pivot.

        The pivot itself and every point coinciding with it are left out.
        Equal angles are ordered by ascending distance from the pivot.

        Args:
            candidates: Indices to order, all points if None.

        Returns:
            Index array, pivot excluded, in scan order.
        """
        if candidates is None:
            candidates = np.arange(len(self))
        candidates = candidates[self.distances[candidates] > 0]
        order = np.lexsort((self.distances[candidates], self.angles[candidates]))
        return candidates[order]


@dataclass
class GrahamScanConfig:
    """
    Configuration options for the Graham scan algorithm.

    Attributes:
        use_preprocessing: Enable interior point filtering.
        preprocessing_threshold: Point count threshold for preprocessing.
    """

    use_preprocessing: bool = False
    preprocessing_threshold: int = 10000

    @classmethod
    def from_cfg(cls) -> GrahamScanConfig:
        """Build the config from the ``scan`` section of the loaded YAML."""
        scan_cfg = CFG['scan'] or {}
        return cls(
            use_preprocessing=bool(scan_cfg.get('use_preprocessing', False)),
            preprocessing_threshold=int(scan_cfg.get('preprocessing_threshold', 10000)),
        )


class GrahamScan:
    """
    Graham scan convex hull algorithm with an optional preprocessing pipeline.

    Example:
        >>> scanner = GrahamScan(GrahamScanConfig(use_preprocessing=True))
        >>> hull = scanner(points)

    Attributes:
        config: Algorithm configuration options.
    """

    __slots__ = ("config", "_preprocessors")

    def __init__(self, config: GrahamScanConfig | None = None) -> None:
        """
        Initialize scanner with configuration.

        Args:
            config: Options controlling algorithm behavior, or None for the
                values in the loaded YAML config.
        """
        self.config = config or GrahamScanConfig.from_cfg()
        self._preprocessors: list[Preprocessor] = []
        self._setup_preprocessors()

    def _setup_preprocessors(self) -> None:
        """Configure preprocessing pipeline based on config."""
        if self.config.use_preprocessing:
            self._preprocessors.append(
                InteriorPointFilter(self.config.preprocessing_threshold)
            )

    def __call__(self, points: np.ndarray) -> np.ndarray:
        """Enable callable syntax: scanner(points)."""
        return self.compute(points)

    def compute(self, points: np.ndarray) -> np.ndarray:
        """
        Compute the convex hull of a set of 2D points.

        Args:
            points: (N, 2) array of 2D point coordinates.

        Returns:
            (H, 2) array of hull vertices in counter-clockwise order starting
            at the pivot. Empty (0, 2) array for fewer than 3 points.
        """
        cloud = PointCloud(points)
        return cloud.points[self._hull_indices(cloud)].copy()

    def hull_indices(self, points: np.ndarray) -> np.ndarray:
        """Same as ``compute`` but returns row indices into ``points``."""
        return self._hull_indices(PointCloud(points))

    def _hull_indices(self, cloud: PointCloud) -> np.ndarray:
        if len(cloud) < 3:
            return np.empty(0, dtype=np.int64)

        candidates = self._apply_preprocessors(cloud)
        order = cloud.polar_order(candidates)
        if len(order) == 0:
            logger.debug("All %d points coincide with the pivot, no hull", len(cloud))
            return np.empty(0, dtype=np.int64)

        logger.debug(
            "Pivot %s, sorting %d of %d points",
            tuple(cloud.pivot),
            len(order),
            len(cloud),
        )
        scan_order = np.concatenate(([cloud.pivot_idx], order))
        stack = graham_stack(np.ascontiguousarray(cloud.points[scan_order]))
        return scan_order[stack]

    def _apply_preprocessors(self, cloud: PointCloud) -> np.ndarray:
        """Execute preprocessing pipeline, narrowing the candidate indices."""
        candidates = np.arange(len(cloud))
        for preprocessor in self._preprocessors:
            kept = preprocessor.process(PointCloud(cloud.points[candidates]))
            candidates = candidates[kept]
        return candidates


def graham_scan(points: np.ndarray, use_preprocessing: bool = False) -> np.ndarray:
    """
    Compute convex hull using Graham scan algorithm.

    Functional interface wrapping the OOP implementation.

    Args:
        points: (N, 2) array of 2D point coordinates.
        use_preprocessing: Enable interior point filtering.

    Returns:
        (H, 2) array of convex hull vertices in counter-clockwise order.

    Example:
        >>> points = np.random.rand(1000, 2)
        >>> hull = graham_scan(points, use_preprocessing=True)
    """
    config = GrahamScanConfig(use_preprocessing=use_preprocessing, preprocessing_threshold=0)
    return GrahamScan(config)(points)


def compute_hull(points: Sequence, scanner: GrahamScan | None = None) -> list[Point]:
    """
    Compute the convex hull of a sequence of points.

    Accepts ``Point`` instances or plain ``(x, y)`` pairs. The result holds
    the caller's own ``Point`` objects where they were given, otherwise new
    ones carrying their position in ``points`` as ``index``.

    Returns:
        Hull vertices in counter-clockwise order starting at the pivot, or
        an empty list when fewer than 3 points are given.
    """
    if len(points) < 3:
        return []
    scanner = scanner or GrahamScan()
    indices = scanner.hull_indices(points_to_array(points))
    return [as_point(points[i], int(i)) for i in indices]
