"""Classify decoded JSON values into a closed set of kinds."""
from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "array"
    MAPPING = "object"
    UNKNOWN = "unknown"


def kind_of(value: Any) -> ValueKind:
    """Return the JSON kind of ``value``; bools are never numbers."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.UNKNOWN


def is_integral(value: Any) -> bool:
    """True for ints and for finite floats without a fractional part."""
    if kind_of(value) is not ValueKind.NUMBER:
        return False
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return True


def describe(value: Any) -> str:
    """Short name of the value's kind for error messages."""
    kind = kind_of(value)
    if kind is ValueKind.NUMBER:
        return "integer" if isinstance(value, int) else "number"
    if kind is ValueKind.UNKNOWN:
        return type(value).__name__
    return kind.value


def json_equal(left: Any, right: Any) -> bool:
    """Compare two decoded JSON values without conflating bools and numbers."""
    left_kind = kind_of(left)
    if left_kind is not kind_of(right):
        return False
    if left_kind is ValueKind.SEQUENCE:
        return len(left) == len(right) and all(
            json_equal(a, b) for a, b in zip(left, right)
        )
    if left_kind is ValueKind.MAPPING:
        return left.keys() == right.keys() and all(
            json_equal(left[key], right[key]) for key in left
        )
    return left == right


__all__ = ["ValueKind", "describe", "is_integral", "json_equal", "kind_of"]
