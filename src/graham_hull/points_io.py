"""Plain-text point files: one ``x y`` pair per line, ``#`` starts a comment."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np

from graham_hull.geometry import Point

logger = logging.getLogger(__name__)


def load_points(path: Path | str) -> list[Point]:
    """
    Read points from a whitespace-separated text file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a row does not hold exactly two numbers.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Points file not found: {path}")

    points = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            stripped = line.split("#", 1)[0].strip()
            if not stripped:
                continue
            fields = stripped.split()
            if len(fields) != 2:
                raise ValueError(
                    f"{path}:{lineno}: expected 2 coordinates, got {len(fields)}"
                )
            try:
                x, y = float(fields[0]), float(fields[1])
            except ValueError as e:
                raise ValueError(f"{path}:{lineno}: {e}") from e
            points.append(Point(x, y, len(points)))

    logger.info("Loaded %d points from %s", len(points), path)
    return points


def save_points(points: Sequence, path: Path | str) -> Path:
    """Write points one per line in the order given."""
    path = Path(path)
    arr = np.array([(p[0], p[1]) for p in points], dtype=np.float64).reshape(-1, 2)
    np.savetxt(path, arr, fmt="%.17g", encoding="utf-8")
    logger.info("Wrote %d points to %s", len(arr), path)
    return path
