"""
Preprocessing stages run before the angular sort.

A preprocessor receives the full point cloud and returns the indices of
the points that may still be hull vertices. Stages only ever discard
points that are strictly inside the hull, so the scan result is the same
with or without them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from graham_hull.scan import PointCloud

logger = logging.getLogger(__name__)


class Preprocessor:
    """
    Base class for point cloud preprocessing stages.

    Subclasses implement specific reductions such as interior point
    filtering.
    """

    def process(self, cloud: PointCloud) -> np.ndarray:
        """
        Select the candidate hull points of the cloud.

        Args:
            cloud: Input point cloud.

        Returns:
            Sorted array of indices into ``cloud.points``.
        """
        raise NotImplementedError


class InteriorPointFilter(Preprocessor):
    """
    Filters interior points using the extremal polygon.

    Identifies the extremal points (min/max x and y), which are all hull
    vertices, and removes the points strictly inside the convex polygon
    they span. Those points cannot be on the hull.

    Attributes:
        min_points: Only apply filtering at or above this cloud size.
    """

    __slots__ = ("min_points",)

    def __init__(self, min_points: int = 10000) -> None:
        """
        Initialize filter with minimum point threshold.

        Args:
            min_points: Filtering overhead not worthwhile below this size.
        """
        self.min_points = min_points

    def process(self, cloud: PointCloud) -> np.ndarray:
        """
        Filter interior points from the point cloud.

        Returns every index if the cloud is below the threshold.
        """
        n = len(cloud)
        if n < self.min_points:
            return np.arange(n)
        candidates = self._get_candidate_indices(cloud)
        logger.debug("Interior filter kept %d of %d points", len(candidates), n)
        return candidates

    def _get_candidate_indices(self, cloud: PointCloud) -> np.ndarray:
        """Determine which point indices could be on the hull."""
        n = len(cloud)
        if n < 4:
            return np.arange(n)
        polygon = self._extremal_polygon(cloud)
        if len(polygon) < 3:
            return np.arange(n)
        return self._filter_interior(cloud, polygon)

    def _get_extremal_indices(self, cloud: PointCloud) -> set[int]:
        """Find indices of the extremal points."""
        return {
            int(np.argmin(cloud.points[:, 0])),
            int(np.argmax(cloud.points[:, 0])),
            int(np.argmin(cloud.points[:, 1])),
            int(np.argmax(cloud.points[:, 1])),
        }

    def _extremal_polygon(self, cloud: PointCloud) -> np.ndarray:
        """Distinct extremal points ordered counter-clockwise around their centroid."""
        quad = np.unique(cloud.points[sorted(self._get_extremal_indices(cloud))], axis=0)
        centroid = quad.mean(axis=0)
        angles = np.arctan2(quad[:, 1] - centroid[1], quad[:, 0] - centroid[0])
        return quad[np.argsort(angles)]

    def _filter_interior(self, cloud: PointCloud, polygon: np.ndarray) -> np.ndarray:
        """Remove points strictly inside the extremal polygon."""
        pts = cloud.points
        inside = np.ones(len(cloud), dtype=bool)
        nxt = np.roll(polygon, -1, axis=0)
        for (ax, ay), (bx, by) in zip(polygon, nxt):
            inside &= (bx - ax) * (pts[:, 1] - ay) - (by - ay) * (pts[:, 0] - ax) > 0
        return np.where(~inside)[0]
