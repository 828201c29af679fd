"""Constraint checkers.

Every checker has the signature ``(value, node, path)`` and returns ``None``
when the value satisfies the constraint, or a :class:`ValidationError`
describing the violation. A checker whose governing keyword is absent from
``node`` is a no-op. Malformed keywords raise :class:`SchemaError`.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Callable, List, Optional, Sequence, Tuple

from . import core
from .errors import SchemaError, ValidationError
from .formats import FORMAT_CHECKERS, FORMAT_DESCRIPTIONS
from .paths import SchemaNode, join_index, join_property
from .values import ValueKind, is_integral, json_equal, kind_of

Checker = Callable[[Any, SchemaNode, str], Optional[ValidationError]]


# ----------------------------------------------------------------------
# keyword readers
# ----------------------------------------------------------------------
def _number_field(node: SchemaNode, key: str, path: str) -> Optional[float]:
    if key not in node:
        return None
    bound = node[key]
    if kind_of(bound) is not ValueKind.NUMBER:
        raise SchemaError(f"'{key}' must be a number, got {bound!r}", path)
    return bound


def _count_field(node: SchemaNode, key: str, path: str) -> Optional[int]:
    if key not in node:
        return None
    count = node[key]
    if not is_integral(count) or count < 0:
        raise SchemaError(f"'{key}' must be a non-negative integer, got {count!r}", path)
    return int(count)


def _flag(node: SchemaNode, key: str, path: str) -> bool:
    flag = node.get(key, False)
    if not isinstance(flag, bool):
        raise SchemaError(f"'{key}' must be a boolean, got {flag!r}", path)
    return flag


@lru_cache(maxsize=256)
def _compile(pattern: str) -> "re.Pattern[str]":
    return re.compile(pattern)


def type_label(node: SchemaNode) -> str:
    """Human readable name of the type(s) a schema node allows."""
    declared = node.get("type", "any") if isinstance(node, Mapping) else "any"
    if isinstance(declared, list):
        return "|".join(str(name) for name in declared)
    return str(declared)


# ----------------------------------------------------------------------
# numeric
# ----------------------------------------------------------------------
def check_minimum(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    minimum = _number_field(node, "minimum", path)
    if minimum is not None and value < minimum:
        return ValidationError(path, f"{value} is less than {minimum}")
    return None


def check_exclusive_minimum(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    minimum = _number_field(node, "minimum", path)
    if _flag(node, "exclusiveMinimum", path) and minimum is not None and value == minimum:
        return ValidationError(path, f"{value} equals the exclusive minimum {minimum}")
    return None


def check_maximum(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    maximum = _number_field(node, "maximum", path)
    if maximum is not None and value > maximum:
        return ValidationError(path, f"{value} is greater than {maximum}")
    return None


def check_exclusive_maximum(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    maximum = _number_field(node, "maximum", path)
    if _flag(node, "exclusiveMaximum", path) and maximum is not None and value == maximum:
        return ValidationError(path, f"{value} equals the exclusive maximum {maximum}")
    return None


# ----------------------------------------------------------------------
# string
# ----------------------------------------------------------------------
def check_min_length(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    min_length = _count_field(node, "minLength", path)
    if min_length is not None and len(value) < min_length:
        return ValidationError(
            path, f"string is shorter than {min_length} characters ({len(value)})"
        )
    return None


def check_max_length(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    max_length = _count_field(node, "maxLength", path)
    if max_length is not None and len(value) > max_length:
        return ValidationError(
            path, f"string is longer than {max_length} characters ({len(value)})"
        )
    return None


def check_pattern(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    if "pattern" not in node:
        return None
    pattern = node["pattern"]
    if not isinstance(pattern, str):
        raise SchemaError(f"'pattern' must be a string, got {pattern!r}", path)
    try:
        compiled = _compile(pattern)
    except re.error as exc:
        raise SchemaError(f"Invalid pattern '{pattern}': {exc}", path) from exc
    if compiled.search(value) is None:
        return ValidationError(path, f"{value!r} does not match pattern '{pattern}'")
    return None


def check_format(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    if "format" not in node:
        return None
    name = node["format"]
    if not isinstance(name, str) or name not in FORMAT_CHECKERS:
        raise SchemaError(f"Unknown format {name!r}", path)
    checker = FORMAT_CHECKERS[name]
    if checker is not None and not checker(value):
        return ValidationError(path, f"{value!r} is not {FORMAT_DESCRIPTIONS[name]}")
    return None


# ----------------------------------------------------------------------
# shared
# ----------------------------------------------------------------------
def check_enum(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    if "enum" not in node:
        return None
    allowed = node["enum"]
    if not isinstance(allowed, (list, tuple)):
        raise SchemaError(f"'enum' must be an array, got {allowed!r}", path)
    members = value if kind_of(value) is ValueKind.SEQUENCE else [value]
    for member in members:
        if not any(json_equal(member, option) for option in allowed):
            return ValidationError(path, f"{member!r} is not one of {list(allowed)!r}")
    return None


# ----------------------------------------------------------------------
# array
# ----------------------------------------------------------------------
def check_min_items(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    min_items = _count_field(node, "minItems", path)
    if min_items is not None and len(value) < min_items:
        return ValidationError(path, f"too few array items ({len(value)} < {min_items})")
    return None


def check_max_items(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    max_items = _count_field(node, "maxItems", path)
    if max_items is not None and len(value) > max_items:
        return ValidationError(path, f"too many array items ({len(value)} > {max_items})")
    return None


def item_schemas(node: SchemaNode, path: str) -> Sequence[SchemaNode]:
    """Return the list form of ``items``, raising for a missing or malformed one."""
    items = node.get("items")
    if isinstance(items, Mapping):
        return [items]
    if isinstance(items, list) and items and all(isinstance(i, Mapping) for i in items):
        return items
    if items is None:
        raise SchemaError("Array schema does not define items", path)
    raise SchemaError(f"'items' must be a schema or a list of schemas, got {items!r}", path)


def check_items(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    schemas = item_schemas(node, path)
    if isinstance(node["items"], Mapping):
        for index, element in enumerate(value):
            error = core.check_value(element, schemas[0], join_index(path, index))
            if error is not None:
                return error
        return None

    for index, element in enumerate(value):
        element_path = join_index(path, index)
        failures: List[Tuple[str, ValidationError]] = []
        for candidate in schemas:
            error = core.check_value(element, candidate, element_path)
            if error is None:
                break
            failures.append((type_label(candidate), error))
        else:
            attempted = ", ".join(label for label, _ in failures)
            return ValidationError(
                element_path,
                f"item does not match any of the allowed item types ({attempted})",
                failures,
            )
    return None


# ----------------------------------------------------------------------
# object
# ----------------------------------------------------------------------
def declared_properties(node: SchemaNode, path: str) -> SchemaNode:
    properties = node.get("properties")
    if properties is None:
        raise SchemaError("Object schema does not define properties", path)
    if not isinstance(properties, Mapping):
        raise SchemaError(f"'properties' must be an object, got {properties!r}", path)
    return properties


def check_properties(value: Any, node: SchemaNode, path: str) -> Optional[ValidationError]:
    for name, subschema in declared_properties(node, path).items():
        child_path = join_property(path, name)
        if not isinstance(subschema, Mapping):
            raise SchemaError(f"Schema for property '{name}' is not an object", child_path)
        if name not in value:
            if _flag(subschema, "required", child_path):
                return ValidationError(child_path, "missing required property")
            continue
        error = core.check_value(value[name], subschema, child_path)
        if error is not None:
            return error
    return None


NUMERIC_CHECKS: Tuple[Checker, ...] = (
    check_minimum,
    check_exclusive_minimum,
    check_maximum,
    check_exclusive_maximum,
    check_enum,
)
STRING_CHECKS: Tuple[Checker, ...] = (
    check_pattern,
    check_min_length,
    check_max_length,
    check_format,
    check_enum,
)
ARRAY_CHECKS: Tuple[Checker, ...] = (check_min_items, check_max_items, check_items)
OBJECT_CHECKS: Tuple[Checker, ...] = (check_properties,)


def run_checks(
    checks: Sequence[Checker], value: Any, node: SchemaNode, path: str
) -> Optional[ValidationError]:
    """Run ``checks`` in order and return the first violation."""
    for check in checks:
        error = check(value, node, path)
        if error is not None:
            return error
    return None


__all__ = [
    "ARRAY_CHECKS",
    "NUMERIC_CHECKS",
    "OBJECT_CHECKS",
    "STRING_CHECKS",
    "Checker",
    "check_enum",
    "check_exclusive_maximum",
    "check_exclusive_minimum",
    "check_format",
    "check_items",
    "check_max_items",
    "check_max_length",
    "check_maximum",
    "check_min_items",
    "check_min_length",
    "check_minimum",
    "check_pattern",
    "check_properties",
    "declared_properties",
    "item_schemas",
    "run_checks",
    "type_label",
]
