"""Logic for deep merging configuration dictionaries."""

from collections.abc import Collection
from typing import Any


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    additive_keys: Collection[str] = (),
) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Nested mappings merge recursively and other values in ``update`` win,
    except that a list under one of ``additive_keys`` is unioned with the
    base list (deduplicated, base entries first).
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value, additive_keys)
        elif (
            key in additive_keys
            and isinstance(current, list)
            and isinstance(value, list)
        ):
            merged = list(current)
            for v in value:
                if v not in merged:
                    merged.append(v)
            result[key] = merged
        else:
            result[key] = value
    return result
