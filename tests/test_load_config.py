"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from docpages.deep_merge import deep_merge
from docpages.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    assert deep_merge(base, update) == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"site": {"title": "x", "base_url": "y"}}
    update = {"site": {"title": "z"}}
    assert deep_merge(base, update) == {"site": {"title": "z", "base_url": "y"}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that lists are replaced by default."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3]}) == {"arr": [3]}


def test_deep_merge_suffixes_additive() -> None:
    """Verify that usage suppressed suffixes extend the defaults."""
    base = {"usage_suppressed_suffixes": [".d.ts"]}
    update = {"usage_suppressed_suffixes": [".d.mts", ".d.ts"]}
    merged = deep_merge(base, update)
    assert merged["usage_suppressed_suffixes"] == [".d.ts", ".d.mts"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["site"]["title"] == "Deno Doc"
    assert config["library_prefix"] == "deno/"
    assert config["libraries"]["deno/stable"] == "Deno CLI APIs"


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config overrides defaults without mutating them."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "site": {"title": "My Docs"},
        "usage_suppressed_suffixes": [".d.mts"],
        "include_private": True,
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["site"]["title"] == "My Docs"
    assert loaded["site"]["base_url"] == DEFAULT_CONFIG["site"]["base_url"]
    assert loaded["usage_suppressed_suffixes"] == [".d.ts", ".d.mts"]
    assert loaded["include_private"] is True
    assert DEFAULT_CONFIG["site"]["title"] == "Deno Doc"


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG
