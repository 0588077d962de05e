import matplotlib.pyplot as plt

from graham_hull.geometry import Point
from graham_hull.rendering import draw_hull
from graham_hull.rendering import draw_point
from graham_hull.rendering import save_hull_plot


def test_draw_point_uses_configured_radius():
    _, ax = plt.subplots()
    dot = draw_point(ax, Point(5, 6))
    assert dot.center == (5, 6)
    assert dot.radius == 3


def test_draw_hull_closes_the_loop():
    _, ax = plt.subplots()
    line = draw_hull(ax, [Point(0, 0), Point(4, 0), Point(0, 4)])
    xs, ys = line.get_data()
    assert list(xs) == [0, 4, 0, 0]
    assert list(ys) == [0, 0, 4, 0]


def test_draw_hull_skips_short_hulls():
    _, ax = plt.subplots()
    assert draw_hull(ax, []) is None
    assert draw_hull(ax, [Point(1, 1)]) is None
    assert len(ax.lines) == 0


def test_save_hull_plot(tmp_path):
    points = [(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)]
    hull = points[:4]
    path = save_hull_plot(points, hull, tmp_path / "hull.png")
    assert path.exists()
    assert path.stat().st_size > 0
