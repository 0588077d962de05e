"""
Interactive matplotlib window around the hull computer.

Left clicks drop points on the canvas. Space schedules a single hull
computation after a short delay; until it has run and been drawn, further
clicks and key presses are ignored. ``c`` clears the canvas.
"""

from __future__ import annotations

import logging
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.backend_bases import MouseButton

from graham_hull.config import CFG
from graham_hull.geometry import Point
from graham_hull.rendering import draw_hull
from graham_hull.rendering import draw_point
from graham_hull.rendering import draw_points
from graham_hull.scan import GrahamScan
from graham_hull.scan import compute_hull

logger = logging.getLogger(__name__)

COMPUTE_KEY = " "
CLEAR_KEY = "c"


class HullShell:
    """Collects points from mouse clicks and draws their hull on demand."""

    def __init__(self, settings: dict[str, Any] | None = None, scanner: GrahamScan | None = None):
        self.settings = {**CFG['shell'], **(settings or {})}
        self.scanner = scanner or GrahamScan()
        self.width = self.settings["width"]
        self.height = self.settings["height"]
        self.min_points = self.settings["min_points"]
        self.delay_ms = self.settings["compute_delay_ms"]

        self.points: list[Point] = []
        self.hull: list[Point] = []
        self.is_computing = False
        self._timer = None

        self.fig, self.ax = plt.subplots()
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(self.settings["title"])
        self._reset_axes()

        self.fig.canvas.mpl_connect("button_press_event", self.on_click)
        self.fig.canvas.mpl_connect("key_press_event", self.on_key)

    def _reset_axes(self) -> None:
        self.ax.clear()
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(0, self.height)
        self.ax.set_aspect("equal")
        self.ax.set_title(self.settings["title"])

    def on_click(self, event) -> None:
        if self.is_computing or event.inaxes is not self.ax:
            return
        if event.button != MouseButton.LEFT or event.xdata is None:
            return

        point = Point(float(event.xdata), float(event.ydata), len(self.points))
        self.points.append(point)
        draw_point(self.ax, point, self.settings["point_radius"], self.settings["point_color"])
        self.fig.canvas.draw_idle()

    def on_key(self, event) -> None:
        if self.is_computing:
            return
        if event.key == COMPUTE_KEY and len(self.points) >= self.min_points:
            self.start_computation()
        elif event.key == CLEAR_KEY:
            self.clear()

    def start_computation(self) -> None:
        self.is_computing = True
        logger.info("Computing hull of %d points in %d ms", len(self.points), self.delay_ms)
        self._timer = self.fig.canvas.new_timer(interval=self.delay_ms)
        self._timer.single_shot = True
        self._timer.add_callback(self._compute_and_draw)
        self._timer.start()

    def _compute_and_draw(self) -> None:
        try:
            self.hull = compute_hull(self.points, self.scanner)
            self._reset_axes()
            draw_hull(self.ax, self.hull, self.settings["hull_color"], self.settings["line_width"])
            draw_points(self.ax, self.points, self.settings["point_radius"], self.settings["point_color"])
            self.fig.canvas.draw_idle()
            logger.info("Hull has %d vertices", len(self.hull))
        finally:
            self.is_computing = False
            self._timer = None

    def clear(self) -> None:
        self.points.clear()
        self.hull = []
        self._reset_axes()
        self.fig.canvas.draw_idle()

    def show(self) -> None:
        plt.show()
