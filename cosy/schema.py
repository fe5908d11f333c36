"""Validation of configuration values against a schema written as a value."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from cosy.errors import CosyError
from cosy.suggest import find_best_match


class ValidationLevel(enum.Enum):
    """Severity of a validation finding."""

    ERROR = "Error"
    WARNING = "Warning"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationItem:
    """One finding: where it occurred and what is wrong."""

    level: ValidationLevel
    path: str
    message: str

    def __str__(self) -> str:
        return f"[{self.level} at {self.path}] {self.message}"


class SchemaError(CosyError):
    """The schema itself is malformed, so validation cannot continue."""

    def __init__(self, item: ValidationItem) -> None:
        self.item = item
        super().__init__(str(item))


def type_name(value: Any) -> str:
    """Return the configuration type name of a value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


_TYPE_CHECKS = {
    "any": lambda v: True,
    "string": lambda v: isinstance(v, str),
    "integer": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "float": lambda v: isinstance(v, float),
    "boolean": lambda v: isinstance(v, bool),
    "bool": lambda v: isinstance(v, bool),
    "null": lambda v: v is None,
    "number": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
}


def validate(instance: Any, schema: Any) -> list[ValidationItem]:
    """Validate ``instance`` against ``schema`` and return the findings.

    An empty list means the instance is valid. Raises SchemaError when the
    schema is malformed.
    """
    report: list[ValidationItem] = []
    _validate(instance, schema, "$", report)
    return report


def _error(path: str, message: str) -> ValidationItem:
    return ValidationItem(ValidationLevel.ERROR, path, message)


def _extract_metadata(schema: Any) -> tuple[Any, str | None, bool]:
    """Split the extended form ``{type: ..., deprecated: ..., optional: ...}``."""
    if isinstance(schema, dict) and isinstance(schema.get("type"), str):
        deprecated = schema.get("deprecated")
        optional = schema.get("optional")
        return (
            schema["type"],
            deprecated if isinstance(deprecated, str) else None,
            optional if isinstance(optional, bool) else False,
        )
    return schema, None, False


def _validate(instance: Any, schema: Any, path: str, report: list[ValidationItem]) -> None:
    effective, deprecation, _ = _extract_metadata(schema)

    if deprecation is not None:
        report.append(
            ValidationItem(ValidationLevel.WARNING, path, f"Deprecated usage: {deprecation}")
        )

    if isinstance(effective, str):
        _validate_type(instance, effective, path, report)
    elif isinstance(effective, dict):
        _validate_object(instance, effective, path, report)
    elif isinstance(effective, list):
        if len(effective) != 1:
            raise SchemaError(
                _error(path, "Array schema must contain exactly one element specifier")
            )
        if isinstance(instance, list):
            for index, item in enumerate(instance):
                _validate(item, effective[0], f"{path}[{index}]", report)
        else:
            report.append(_error(path, f"Expected array, found {type_name(instance)}"))
    else:
        raise SchemaError(
            _error(path, f"Unsupported schema value type: {type_name(effective)}")
        )


def _validate_object(
    instance: Any, schema_obj: dict, path: str, report: list[ValidationItem]
) -> None:
    if not isinstance(instance, dict):
        report.append(_error(path, f"Expected object, found {type_name(instance)}"))
        return

    for key, sub_schema in schema_obj.items():
        if key in instance:
            _validate(instance[key], sub_schema, f"{path}.{key}", report)
        elif not _extract_metadata(sub_schema)[2]:
            report.append(_error(path, f"Missing required field '{key}'"))

    schema_keys = list(schema_obj)
    for key in instance:
        if key in schema_obj:
            continue
        message = f"Unknown field '{key}'"
        best = find_best_match(key, schema_keys, 2)
        if best is not None:
            message += f"; did you mean '{best}'?"
        report.append(_error(path, message))


def _validate_type(instance: Any, name: str, path: str, report: list[ValidationItem]) -> None:
    check = _TYPE_CHECKS.get(name)
    if check is None:
        raise SchemaError(_error(path, f"Unknown type '{name}'"))
    if not check(instance):
        report.append(
            _error(path, f"Type mismatch: expected {name}, found {type_name(instance)}")
        )