import pytest

from graham_hull.geometry import Point
from graham_hull.points_io import load_points
from graham_hull.points_io import save_points


def test_load_skips_comments_and_blank_lines(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("# square\n0 0\n\n4 0   # corner\n4.5e0 4\n-1 2.25\n")

    points = load_points(path)

    assert points == [Point(0, 0), Point(4, 0), Point(4.5, 4), Point(-1, 2.25)]
    assert [p.index for p in points] == [0, 1, 2, 3]


@pytest.mark.parametrize("row", ["1 2 3", "1", "a b"])
def test_load_rejects_malformed_rows(tmp_path, row):
    path = tmp_path / "bad.txt"
    path.write_text(f"0 0\n{row}\n")
    with pytest.raises(ValueError, match=":2"):
        load_points(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_points(tmp_path / "nothing.txt")


def test_save_then_load(tmp_path):
    path = tmp_path / "hull.txt"
    hull = [Point(0.1, 0.2), Point(3.0, 0.0), (1.0, 7.25)]

    save_points(hull, path)

    assert load_points(path) == [Point(0.1, 0.2), Point(3.0, 0.0), Point(1.0, 7.25)]


def test_save_empty_hull(tmp_path):
    path = save_points([], tmp_path / "empty.txt")
    assert load_points(path) == []
