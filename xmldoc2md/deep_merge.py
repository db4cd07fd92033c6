"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively.
    - Scalars and lists in ``update`` replace those in ``base``.
    - ``None`` in ``update`` keeps the base value for nested sections.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif value is None and isinstance(result.get(key), dict):
            continue
        else:
            result[key] = value
    return result
