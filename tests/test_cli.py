import pytest

from graham_hull import cli
from graham_hull.points_io import load_points


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / "square.txt"
    path.write_text("2 2\n0 0\n4 0\n4 4\n0 4\n")
    return path


def test_compute_prints_hull(square_file, capsys):
    cli.main(["compute", str(square_file)])
    out = capsys.readouterr().out.split("\n")
    assert out[:4] == ["0 0", "4 0", "4 4", "0 4"]


def test_compute_writes_outputs(square_file, tmp_path):
    hull_path = tmp_path / "hull.txt"
    plot_path = tmp_path / "hull.png"

    cli.main([
        "compute", str(square_file),
        "--output", str(hull_path),
        "--plot", str(plot_path),
        "--preprocess",
        "--verify",
    ])

    assert [(p.x, p.y) for p in load_points(hull_path)] == [(0, 0), (4, 0), (4, 4), (0, 4)]
    assert plot_path.exists()


def test_compute_degenerate_input(tmp_path, capsys):
    path = tmp_path / "two.txt"
    path.write_text("0 0\n1 1\n")
    cli.main(["compute", str(path), "--verify"])
    assert capsys.readouterr().out == ""


def test_verify_accepts_collinear_segment_hull(tmp_path, capsys):
    path = tmp_path / "line.txt"
    path.write_text("0 0\n1 1\n2 2\n")
    cli.main(["compute", str(path), "--verify"])
    assert capsys.readouterr().out.split() == ["0", "0", "2", "2"]


def test_missing_points_file_exits_with_error(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["compute", str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 1


def test_config_option(square_file, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("scan:\n  use_preprocessing: true\n  preprocessing_threshold: 0\n")
    cli.main(["--config", str(config_path), "compute", str(square_file)])


def test_bench_runs(caplog):
    caplog.set_level("INFO")
    cli.main(["bench", "--count", "2000", "--seed", "1"])
    assert any("Hull size" in r.message for r in caplog.records)


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.main([])
