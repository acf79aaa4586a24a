from __future__ import annotations

import json
from pathlib import Path

import pytest

from plugqc.config import load_filter_config, resolve_filter_config
from plugqc.core.batch import quality_assessment
from plugqc.core.types import FilterConfig


def test_load_filter_config_overrides_defaults(tmp_path: Path):
    cfg_path = tmp_path / "qc.json"
    cfg_path.write_text(json.dumps({"whisker": 3.0}), encoding="utf-8")
    cfg = load_filter_config(cfg_path)
    assert cfg == FilterConfig(control_column="orange", whisker=3.0, min_replicates=2)


def test_quality_assessment_accepts_config_path(tmp_path: Path, e2e_run):
    cfg_path = tmp_path / "qc.json"
    cfg_path.write_text(json.dumps({"min_replicates": 3}), encoding="utf-8")
    out = quality_assessment([e2e_run], config=cfg_path)
    assert all(len(df) == 0 for df in out[0].values())
    out = quality_assessment([e2e_run], config=str(cfg_path))
    assert all(len(df) == 0 for df in out[0].values())


def test_resolve_filter_config_passthrough_and_default():
    cfg = FilterConfig(whisker=2.0)
    assert resolve_filter_config(cfg) is cfg
    assert resolve_filter_config(None) == FilterConfig()
    with pytest.raises(TypeError):
        resolve_filter_config({"whisker": 2.0})


def test_unknown_key_rejected(tmp_path: Path):
    cfg_path = tmp_path / "qc.json"
    cfg_path.write_text(json.dumps({"whiskers": 3.0}), encoding="utf-8")
    with pytest.raises(ValueError, match="Unknown filter config key"):
        load_filter_config(cfg_path)


def test_invalid_json_reports_line_and_column(tmp_path: Path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"a": 1,}\n', encoding="utf-8")
    with pytest.raises(ValueError, match=r"line \d+, column \d+"):
        load_filter_config(bad)


def test_non_object_json_config_rejected(tmp_path: Path):
    bad = tmp_path / "list.json"
    bad.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(ValueError, match="must hold a JSON object"):
        load_filter_config(bad)


def test_non_json_extension_rejected(tmp_path: Path):
    bad = tmp_path / "cfg.yaml"
    bad.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError, match="must be a .json file"):
        load_filter_config(bad)


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_filter_config(tmp_path / "nope.json")
