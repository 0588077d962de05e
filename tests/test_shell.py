from types import SimpleNamespace

import pytest
from matplotlib.backend_bases import MouseButton

from graham_hull.shell import HullShell


@pytest.fixture
def shell():
    return HullShell()


def click(shell, x, y, button=MouseButton.LEFT, inside=True):
    event = SimpleNamespace(
        inaxes=shell.ax if inside else None, xdata=x, ydata=y, button=button
    )
    shell.on_click(event)


def press(shell, key):
    shell.on_key(SimpleNamespace(key=key))


def test_canvas_matches_settings(shell):
    assert shell.ax.get_xlim() == (0, 800)
    assert shell.ax.get_ylim() == (0, 600)


def test_clicks_add_points(shell):
    click(shell, 10, 20)
    click(shell, 30, 40)
    assert [(p.x, p.y) for p in shell.points] == [(10, 20), (30, 40)]
    assert len(shell.ax.patches) == 2


def test_clicks_outside_axes_or_other_buttons_are_ignored(shell):
    click(shell, 10, 20, inside=False)
    click(shell, 10, 20, button=MouseButton.RIGHT)
    assert shell.points == []


def test_space_needs_three_points(shell):
    click(shell, 10, 10)
    click(shell, 50, 10)
    press(shell, " ")
    assert not shell.is_computing


def test_space_arms_single_shot_timer(shell):
    for x, y in [(100, 100), (300, 100), (200, 300)]:
        click(shell, x, y)
    press(shell, " ")

    assert shell.is_computing
    assert shell._timer is not None
    assert shell._timer.interval == 500
    assert shell._timer.single_shot

    click(shell, 5, 5)
    assert len(shell.points) == 3


def test_timer_callback_draws_hull(shell):
    for x, y in [(100, 100), (300, 100), (300, 300), (100, 300), (200, 200)]:
        click(shell, x, y)
    press(shell, " ")
    shell._compute_and_draw()

    assert not shell.is_computing
    assert [(p.x, p.y) for p in shell.hull] == [(100, 100), (300, 100), (300, 300), (100, 300)]
    (line,) = shell.ax.lines
    xs, ys = line.get_data()
    assert list(zip(xs, ys))[0] == list(zip(xs, ys))[-1]
    assert len(shell.ax.patches) == 5


def test_clear_resets_points(shell):
    click(shell, 10, 20)
    press(shell, "c")
    assert shell.points == []
    assert len(shell.ax.patches) == 0
