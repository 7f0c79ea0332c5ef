"""Tests covering the EcoFit configuration loader behaviour."""

import json
from pathlib import Path

import pytest

from ecofit.exceptions import EcoFitConfigError
from ecofit.utils import ConfigLoader


def test_config_loader_starts_from_schema_defaults() -> None:
    config = ConfigLoader().load().to_dict()
    assert config["evaluation"]["blend"] == "product"
    assert config["audit"]["enabled"] is True
    assert config["audit"]["sink"] == "none"


def test_config_loader_merges_files_and_overrides(tmp_path: Path) -> None:
    global_path = tmp_path / "global.yaml"
    global_path.write_text("audit:\n  sink: loguru\n", encoding="utf-8")
    task_path = tmp_path / "task.json"
    task_path.write_text(json.dumps({"evaluation": {"blend": "mean"}}), encoding="utf-8")

    loaded = ConfigLoader(global_path).load(task_path, overrides={"audit": {"enabled": False}})
    config = loaded.to_dict()
    assert config["audit"] == {"enabled": False, "sink": "loguru", "prefix": "audit: "}
    assert config["evaluation"]["blend"] == "mean"
    assert loaded.get("logging", "level") == "WARNING"


def test_config_loader_accepts_yaml_strings() -> None:
    config = ConfigLoader().load("evaluation:\n  blend: minimum\n").to_dict()
    assert config["evaluation"]["blend"] == "minimum"


def test_config_loader_unknown_section_raises() -> None:
    loader = ConfigLoader()
    with pytest.raises(ValueError) as err:
        loader.load(overrides={"unknown_section": {"foo": 1}})
    assert "unknown_section" in str(err.value)


def test_config_loader_unknown_key_raises() -> None:
    loader = ConfigLoader()
    with pytest.raises(EcoFitConfigError) as err:
        loader.load(overrides={"audit": {"invalid_key": 1}})
    assert "audit.invalid_key" in str(err.value)


def test_config_loader_rejects_unsupported_files(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("[audit]\n", encoding="utf-8")
    with pytest.raises(EcoFitConfigError):
        ConfigLoader().load(path)
    with pytest.raises(FileNotFoundError):
        ConfigLoader().load(tmp_path / "missing.yaml")
