"""Type validators: one per JSON-Schema type name."""
from __future__ import annotations

import math
from typing import Any, Callable, Dict, Optional

from .checks import (
    ARRAY_CHECKS,
    NUMERIC_CHECKS,
    OBJECT_CHECKS,
    STRING_CHECKS,
    declared_properties,
    item_schemas,
    run_checks,
)
from .errors import ValidationError
from .paths import SchemaNode
from .values import ValueKind, describe, is_integral, kind_of

TypeValidator = Callable[[Any, SchemaNode, str], Optional[ValidationError]]


def _mismatch(expected: str, value: Any, path: str) -> ValidationError:
    return ValidationError(path, f"expected {expected}, got {describe(value)}")


def validate_any(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    return None


def validate_boolean(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    if kind_of(value) is not ValueKind.BOOLEAN:
        return _mismatch("boolean", value, path)
    return None


def validate_null(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    if kind_of(value) is not ValueKind.NULL:
        return _mismatch("null", value, path)
    return None


def validate_integer(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    if not is_integral(value):
        return _mismatch("integer", value, path)
    return run_checks(NUMERIC_CHECKS, value, node, path)


def validate_number(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    if kind_of(value) is not ValueKind.NUMBER:
        return _mismatch("number", value, path)
    if math.isnan(value):
        return ValidationError(path, "NaN is not a JSON number")
    return run_checks(NUMERIC_CHECKS, value, node, path)


def validate_string(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    if kind_of(value) is not ValueKind.STRING:
        return _mismatch("string", value, path)
    return run_checks(STRING_CHECKS, value, node, path)


def validate_array(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    if kind_of(value) is not ValueKind.SEQUENCE:
        return _mismatch("array", value, path)
    item_schemas(node, path)
    return run_checks(ARRAY_CHECKS, value, node, path)


def validate_object(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    if kind_of(value) is not ValueKind.MAPPING:
        return _mismatch("object", value, path)
    declared_properties(node, path)
    return run_checks(OBJECT_CHECKS, value, node, path)


TYPE_VALIDATORS: Dict[str, TypeValidator] = {
    "any": validate_any,
    "boolean": validate_boolean,
    "integer": validate_integer,
    "number": validate_number,
    "string": validate_string,
    "array": validate_array,
    "object": validate_object,
    "null": validate_null,
}

__all__ = [
    "TYPE_VALIDATORS",
    "TypeValidator",
    "validate_any",
    "validate_array",
    "validate_boolean",
    "validate_integer",
    "validate_null",
    "validate_number",
    "validate_object",
    "validate_string",
]
