import pytest

from graham_hull.config import CFG
from graham_hull.config import Config
from graham_hull.scan import GrahamScanConfig
from graham_hull.shell import HullShell


def test_config_is_a_singleton():
    assert Config() is CFG


def test_packaged_defaults():
    assert CFG['shell']['width'] == 800
    assert CFG['shell']['height'] == 600
    assert CFG['shell']['compute_delay_ms'] == 500
    assert CFG.get_nested('shell', 'min_points') == 3
    assert 'scan' in CFG


def test_get_nested_missing_key():
    assert CFG.get_nested('shell', 'nope') is None
    assert CFG.get_nested('nope', 'deeper') is None


def test_load_overrides_and_keeps_defaults(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("scan:\n  use_preprocessing: true\nshell:\n  width: 1024\n")

    CFG.load(path)

    assert CFG['shell']['width'] == 1024
    assert CFG['shell']['height'] == 600
    assert GrahamScanConfig.from_cfg().use_preprocessing is True
    assert GrahamScanConfig.from_cfg().preprocessing_threshold == 10000


def test_empty_section_keeps_defaults(tmp_path):
    path = tmp_path / "empty_section.yaml"
    path.write_text("shell:\n")

    CFG.load(path)

    assert CFG['shell']['width'] == 800
    assert HullShell().min_points == 3


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CFG.load(tmp_path / "missing.yaml")
