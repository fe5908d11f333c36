"""Deep merging of configuration values."""

from __future__ import annotations

from typing import Any


def merge(base: Any, override: Any) -> Any:
    """Deeply merge ``override`` into ``base`` and return the result.

    When both are dicts, ``base`` is updated in place: keys from ``override``
    replace those in ``base`` and nested dicts are merged recursively. In any
    other case (lists, scalars, differing types) ``override`` replaces
    ``base`` and is returned.
    """
    if not (isinstance(base, dict) and isinstance(override, dict)):
        return override
    for key, value in override.items():
        if key in base:
            base[key] = merge(base[key], value)
        else:
            base[key] = value
    return base