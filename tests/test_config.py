"""Tests for configuration loading, merging and validation."""

from pathlib import Path

import pytest

from navigate_straight.deep_merge import deep_merge
from navigate_straight.load_config import (
    DEFAULT_CONFIG,
    ConfigError,
    generated_suffixes,
    list_settings,
    load_config,
)


def write_config(tmp_path: Path, text: str) -> str:
    """Write a config file and return its path."""
    path = tmp_path / "config.yml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_deep_merge_sections() -> None:
    """Verify that sections merge key by key and scalars are overridden."""
    base = {"fallback": {"command": "A", "extra": 1}, "depth": 1}
    merged = deep_merge(base, {"fallback": {"command": "B"}, "depth": 2})
    assert merged == {"fallback": {"command": "B", "extra": 1}, "depth": 2}
    assert base["fallback"]["command"] == "A"


def test_deep_merge_lists_replace_unless_additive() -> None:
    """Verify that only the named list settings are unioned."""
    base = {"suffixes": [".b", ".a"], "other": [1]}
    update = {"suffixes": [".c", ".a"], "other": [2]}

    assert deep_merge(base, update) == {"suffixes": [".c", ".a"], "other": [2]}
    assert deep_merge(base, update, {"suffixes"}) == {
        "suffixes": [".b", ".a", ".c"],
        "other": [2],
    }


def test_list_settings_come_from_defaults() -> None:
    """Verify that additive settings are derived from the default config."""
    assert list_settings(DEFAULT_CONFIG) == {"generated_suffixes"}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert generated_suffixes(config) == [".g.cs", ".g.i.cs"]
    assert config["fallback"]["command"] == "Edit.GoToDefinition"


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file yields the defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config overrides and extends defaults."""
    path = write_config(
        tmp_path,
        "classification:\n"
        "  generated_suffixes: ['.designer.cs']\n"
        "fallback:\n"
        "  command: Edit.PeekDefinition\n",
    )

    config = load_config(path)

    assert generated_suffixes(config) == [".g.cs", ".g.i.cs", ".designer.cs"]
    assert config["fallback"]["command"] == "Edit.PeekDefinition"
    assert DEFAULT_CONFIG["classification"]["generated_suffixes"] == [
        ".g.cs",
        ".g.i.cs",
    ]


def test_empty_section_keeps_defaults(tmp_path: Path) -> None:
    """Verify that a section with no value is treated as empty."""
    path = write_config(tmp_path, "classification:\nfallback:\n")

    config = load_config(path)

    assert generated_suffixes(config) == [".g.cs", ".g.i.cs"]
    assert config["fallback"]["command"] == "Edit.GoToDefinition"


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("classification:\n  generated_suffixes: '.designer.cs'\n", "list"),
        ("classification:\n  generated_suffixes: ['.g.cs', 3]\n", "list"),
        ("classification:\n  generated_suffixes: ['']\n", "non-empty strings"),
        ("classification:\n  generated_suffixes: [[a]]\n", "non-empty strings"),
        ("classification: 5\n", "'classification' must be a mapping"),
        ("fallback:\n  command: 7\n", "fallback.command"),
        ("- not\n- a mapping\n", "mapping at the top"),
        ("classification: [unclosed\n", "UTF-8 YAML"),
    ],
)
def test_invalid_config(tmp_path: Path, text: str, message: str) -> None:
    """Verify that badly typed settings are rejected with a message."""
    with pytest.raises(ConfigError, match=message):
        load_config(write_config(tmp_path, text))


def test_string_suffix_is_not_split(tmp_path: Path) -> None:
    """Verify that a bare string never becomes single-character suffixes."""
    path = write_config(tmp_path, "classification:\n  generated_suffixes: .g.cs\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_config_not_utf8(tmp_path: Path) -> None:
    """Verify that undecodable config files raise ConfigError."""
    path = tmp_path / "config.yml"
    path.write_bytes(b"\xff\xfefallback: x\n")
    with pytest.raises(ConfigError, match="UTF-8"):
        load_config(str(path))
