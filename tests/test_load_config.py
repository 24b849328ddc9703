"""Tests for configuration loading and merging."""

import json
from pathlib import Path

import pytest
import yaml

from src.deep_merge import deep_merge
from src.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    base = {"arr": [1, 2]}
    update = {"arr": [3, 4]}
    merged = deep_merge(base, update)
    assert merged == {"arr": [3, 4]}


def test_deep_merge_include_additive() -> None:
    """Verify that the include list is merged additively, keeping order."""
    base = {"include": ["a.json", "b.json"]}
    update = {"include": ["b.json", "c.json"]}
    merged = deep_merge(base, update)
    assert merged["include"] == ["a.json", "b.json", "c.json"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["templates"]["default"]["output_source_files"] is True
    assert config["templates"]["classy"]["api_entry"] is None
    assert config["opts"]["encoding"] == "utf-8"


def test_load_config_does_not_mutate_defaults(tmp_path: Path) -> None:
    """Verify that loading and editing a config leaves the defaults alone."""
    config = load_config(None)
    config["templates"]["classy"]["api_entry"] = "mylib"
    assert DEFAULT_CONFIG["templates"]["classy"]["api_entry"] is None


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "templates": {"classy": {"api_entry": "mylib", "name": "My Lib"}},
        "source": {"include": ["more.json"]},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["templates"]["classy"]["api_entry"] == "mylib"
    assert loaded["templates"]["classy"]["show_name"] is True  # Default
    assert loaded["source"]["include"] == ["more.json"]


def test_load_config_accepts_json(tmp_path: Path) -> None:
    """Verify that a JSON config file is read by the YAML loader."""
    config_file = tmp_path / "conf.json"
    config_file.write_text(json.dumps({"opts": {"private": True}}))

    loaded = load_config(str(config_file))
    assert loaded["opts"]["private"] is True


def test_load_config_missing_file_uses_defaults(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    loaded = load_config(str(tmp_path / "nope.yml"))
    assert loaded == DEFAULT_CONFIG


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a config file holding a list exits with a message."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- a\n- b\n")
    with pytest.raises(SystemExit):
        load_config(str(config_file))
