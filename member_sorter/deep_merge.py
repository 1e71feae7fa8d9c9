"""Logic for layering a user configuration over the defaults."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return base overlaid with update.

    - Mappings present on both sides are merged recursively.
    - Lists and scalars from update replace the base value, so a user's
      visibility_order is taken as a whole rather than appended.
    """
    result = dict(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result
