"""Exception types raised while parsing, loading and composing configuration."""

from __future__ import annotations


class CosyError(Exception):
    """Base error for all configuration failures.

    ``line`` and ``column`` locate the problem in the input text; both are
    0 when the error has no position (I/O or include failures).
    """

    prefix = ""
    default_message = ""

    def __init__(self, message: str = "", line: int = 0, column: int = 0) -> None:
        self.message = message or self.default_message
        self.line = line
        self.column = column
        super().__init__(self.message)

    def __str__(self) -> str:
        text = f"{self.prefix}{self.message}"
        if self.line:
            return f"{text} (line {self.line}, column {self.column})"
        return text


class CosyIOError(CosyError):
    """A file could not be read."""

    prefix = "IO error: "


class IncludeError(CosyError):
    """An ``include`` or ``extends`` directive could not be resolved."""

    prefix = "Include error: "


class RecursionLimitError(IncludeError):
    """Includes nested deeper than the allowed limit, usually a cycle."""

    prefix = ""
    default_message = "Recursion limit exceeded (max 10 depth)"


class InvalidIncludeTargetError(IncludeError):
    """A directive had a non-string value or named a file that is not an object."""

    prefix = "Invalid include usage: "