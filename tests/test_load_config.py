"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from workspace_resolver.deep_merge import deep_merge
from workspace_resolver.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    merged = deep_merge({"nested": {"x": 1, "y": 2}}, {"nested": {"y": 3, "z": 4}})
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced rather than extended."""
    merged = deep_merge({"hidden_names": [".git"]}, {"hidden_names": ["node_modules"]})
    assert merged["hidden_names"] == ["node_modules"]


def test_load_config_defaults() -> None:
    """Verify that defaults are returned when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_load_config_missing_file() -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config("/nonexistent/config.yml") == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump({"workspace": {"encoding": "latin-1"}, "hidden_names": ["dist"]})
    )
    loaded = load_config(str(config_file))
    assert loaded["workspace"]["encoding"] == "latin-1"
    assert loaded["workspace"]["include_hidden"] is False
    assert loaded["hidden_names"] == ["dist"]


def test_load_config_does_not_mutate_defaults() -> None:
    """Verify that loading a config leaves the defaults untouched."""
    config = load_config(None)
    config["hint"]["exclude_exact_match"] = False
    assert DEFAULT_CONFIG["hint"]["exclude_exact_match"] is True


def test_load_config_can_unhide_defaults(tmp_path: Path) -> None:
    """Verify that an empty hidden_names list clears the default entries."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"hidden_names": []}))
    assert load_config(str(config_file))["hidden_names"] == []
