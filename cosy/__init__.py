"""Layered configuration values: deep merging, include/extends resolution and schema validation."""

__version__ = "1.7.0"

__all__ = ["errors", "include", "load", "merge", "schema", "suggest"]