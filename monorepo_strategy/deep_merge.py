"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively.
    - Scalars and lists in 'update' replace those in 'base'; list order is
      significant (e.g. config filename precedence) so lists are never combined.
    - Keys set to None in 'update' leave the base value in place.
    """
    result = base.copy()
    for key, value in update.items():
        if value is None and key in result:
            continue
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
