from __future__ import annotations
import logging
from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.axes import Axes

from graham_hull.config import CFG

logger = logging.getLogger(__name__)


def draw_point(ax: Axes, point, radius: float | None = None, color: str | None = None) -> patches.Circle:
    shell_cfg = CFG['shell']
    radius = radius if radius != None else shell_cfg['point_radius']
    color = color if color != None else shell_cfg['point_color']

    dot = patches.Circle((point[0], point[1]), radius=radius, color=color, zorder=3)
    ax.add_patch(dot)
    return dot


def draw_points(ax: Axes, points: Sequence, radius: float | None = None, color: str | None = None) -> list:
    return [draw_point(ax, p, radius, color) for p in points]


def draw_hull(ax: Axes, hull: Sequence, color: str | None = None, line_width: float | None = None):
    """Draw every hull edge plus the closing edge back to the first vertex."""
    if len(hull) < 2:
        return None

    shell_cfg = CFG['shell']
    color = color if color != None else shell_cfg['hull_color']
    line_width = line_width if line_width != None else shell_cfg['line_width']

    xs = [p[0] for p in hull] + [hull[0][0]]
    ys = [p[1] for p in hull] + [hull[0][1]]
    line, = ax.plot(xs, ys, color=color, linewidth=line_width, zorder=2)
    return line


def plot_hull(points: Sequence, hull: Sequence, title: str = "Convex Hull (Graham Scan)"):
    """
    Scatter the input points and outline their hull on a new figure.

    Marker sizes are in screen units here since the point cloud can span
    any coordinate range.
    """
    plot_cfg = CFG['plot']
    fig, ax = plt.subplots(figsize=tuple(plot_cfg['figsize']))

    if len(points) > 0:
        xs, ys = zip(*[(p[0], p[1]) for p in points])
        ax.scatter(xs, ys, s=8, color="skyblue", label="Points")
    if len(hull) >= 2:
        hx = [p[0] for p in hull] + [hull[0][0]]
        hy = [p[1] for p in hull] + [hull[0][1]]
        ax.plot(hx, hy, color="red", linewidth=1.2, label="Convex Hull")
        ax.scatter(hx[:-1], hy[:-1], s=16, color="black", zorder=3, label="Hull Vertices")

    ax.margins(plot_cfg['margin'])
    ax.set_aspect('equal', adjustable='datalim')
    ax.set_title(f"{title} - {len(points)} points, {len(hull)} on hull")
    if len(points) > 0:
        ax.legend(loc="upper right")
    return fig, ax


def save_hull_plot(points: Sequence, hull: Sequence, path: Path | str) -> Path:
    path = Path(path)
    fig, _ = plot_hull(points, hull)
    fig.savefig(path, dpi=CFG['plot']['dpi'], bbox_inches="tight")
    plt.close(fig)
    logger.info("Saved plot to %s", path)
    return path
