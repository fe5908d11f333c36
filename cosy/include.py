"""Resolution of ``include`` and ``extends`` directives."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from cosy.errors import CosyIOError, InvalidIncludeTargetError, RecursionLimitError
from cosy.merge import merge
from cosy.schema import type_name

MAX_DEPTH = 10

Parser = Callable[[str], Any]

_MISSING = object()


def resolve(value: Any, base_path: str | Path, parse: Parser) -> Any:
    """Resolve ``extends`` and ``include`` keys throughout ``value``.

    Referenced files are read relative to ``base_path`` and turned into
    values with ``parse``. Precedence is local keys over the included mixin
    over the extended base. Dicts are updated in place; the resolved value
    is also returned.
    """
    return _resolve(value, Path(base_path), parse, 0)


def _resolve(value: Any, base_path: Path, parse: Parser, depth: int) -> Any:
    if depth > MAX_DEPTH:
        raise RecursionLimitError()

    if isinstance(value, list):
        value[:] = [_resolve(item, base_path, parse, depth) for item in value]
        return value
    if not isinstance(value, dict):
        return value

    extends_val = value.pop("extends", _MISSING)
    include_val = value.pop("include", _MISSING)

    for key in list(value):
        value[key] = _resolve(value[key], base_path, parse, depth)

    base: Any = {}
    if extends_val is not _MISSING:
        if not isinstance(extends_val, str):
            raise InvalidIncludeTargetError(
                f"Extends value must be a string, found {type_name(extends_val)}"
            )
        base = _load(extends_val, base_path, parse, depth)

    if include_val is not _MISSING:
        if not isinstance(include_val, str):
            raise InvalidIncludeTargetError(
                f"Include value must be a string, found {type_name(include_val)}"
            )
        base = merge(base, _load(include_val, base_path, parse, depth))

    merged = merge(base, dict(value))
    value.clear()
    value.update(merged)
    return value


def _load(path_str: str, base_path: Path, parse: Parser, depth: int) -> dict:
    include_path = base_path / path_str
    try:
        text = include_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CosyIOError(f"{include_path}: {exc.strerror or exc}") from exc

    loaded = _resolve(parse(text), include_path.parent, parse, depth + 1)
    if not isinstance(loaded, dict):
        raise InvalidIncludeTargetError(
            f"Included/Extended file '{path_str}' must be an Object, "
            f"found {type_name(loaded)}"
        )
    return loaded