"""Logic for loading, merging and validating configuration files."""

from pathlib import Path
from typing import Any

import yaml

from navigate_straight.command_fallback import DEFAULT_FALLBACK_COMMAND
from navigate_straight.deep_merge import deep_merge
from navigate_straight.is_generated_file import GENERATED_SUFFIXES

DEFAULT_CONFIG: dict[str, Any] = {
    "classification": {
        "generated_suffixes": list(GENERATED_SUFFIXES),
    },
    "fallback": {
        "command": DEFAULT_FALLBACK_COMMAND,
    },
}


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


def list_settings(config: dict[str, Any]) -> set[str]:
    """Return the names of list-valued settings, which user files extend."""
    names = set()
    for key, value in config.items():
        if isinstance(value, dict):
            names |= list_settings(value)
        elif isinstance(value, list):
            names.add(key)
    return names


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            config = deep_merge(
                config, _read_user_config(p), list_settings(DEFAULT_CONFIG)
            )
    validate_config(config)
    return config


def _read_user_config(path: Path) -> dict[str, Any]:
    try:
        user_config = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        msg = f"Cannot read {path} as UTF-8 YAML: {e}"
        raise ConfigError(msg) from e
    if not isinstance(user_config, dict):
        msg = f"Expected a mapping at the top of {path}"
        raise ConfigError(msg)
    # An empty section keeps its defaults
    return {k: {} if v is None else v for k, v in user_config.items()}


def validate_config(config: dict[str, Any]) -> None:
    """Check the types of the settings this package reads."""
    for section in DEFAULT_CONFIG:
        if not isinstance(config.get(section), dict):
            msg = f"'{section}' must be a mapping"
            raise ConfigError(msg)

    suffixes = config["classification"].get("generated_suffixes")
    if not isinstance(suffixes, list) or not all(
        isinstance(s, str) and s for s in suffixes
    ):
        msg = "'classification.generated_suffixes' must be a list of non-empty strings"
        raise ConfigError(msg)

    command = config["fallback"].get("command")
    if not isinstance(command, str) or not command:
        msg = "'fallback.command' must be a non-empty string"
        raise ConfigError(msg)


def generated_suffixes(config: dict[str, Any]) -> list[str]:
    """Return the configured generated-file suffixes."""
    return list((config.get("classification") or {}).get("generated_suffixes", []))
