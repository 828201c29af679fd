"""Draft-3 style JSON schema validation."""
from __future__ import annotations

from .core import check_value
from .errors import (
    MalformedPathError,
    PathNotFoundError,
    SchemaCheckError,
    SchemaError,
    ValidationError,
)
from .paths import resolve
from .schema import Schema, validate

__version__ = "0.1.0"

__all__ = [
    "MalformedPathError",
    "PathNotFoundError",
    "Schema",
    "SchemaCheckError",
    "SchemaError",
    "ValidationError",
    "check_value",
    "resolve",
    "validate",
]
