"""Loading and layering several configuration files."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from cosy.errors import CosyIOError
from cosy.include import resolve
from cosy.merge import merge


def load_and_merge(paths: Iterable[str | Path], parse: Callable[[str], Any]) -> Any:
    """Load files in order and deep-merge them; later files override earlier.

    Each file's includes are resolved relative to its own directory before
    it is merged.
    """
    merged: Any = {}
    for raw_path in paths:
        path = Path(raw_path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CosyIOError(f"{path}: {exc.strerror or exc}") from exc
        current = resolve(parse(text), path.parent, parse)
        merged = merge(merged, current)
    return merged