from __future__ import annotations

import pytest

from schemacheck.core import candidate_types, check_value
from schemacheck.errors import SchemaError


def test_candidate_types_normalization() -> None:
    assert candidate_types({}) == ["any"]
    assert candidate_types({"type": "string"}) == ["string"]
    assert candidate_types({"type": ["string", "null"]}) == ["string", "null"]


@pytest.mark.parametrize("declared", ["date", ["string", "date"], [], 5, [{"type": "string"}]])
def test_bad_type_declarations_are_schema_defects(declared) -> None:
    with pytest.raises(SchemaError):
        check_value("x", {"type": declared})


def test_any_accepts_everything() -> None:
    for value in (None, True, 1, 1.5, "s", [1], {"a": 1}):
        assert check_value(value, {"type": "any"}) is None
        assert check_value(value, {}) is None


@pytest.mark.parametrize(
    "type_name, good, bad",
    [
        ("boolean", [True, False], [0, "true", None]),
        ("integer", [0, -3, 2.0], [1.5, True, "1", float("inf")]),
        ("number", [0, 1.5, -2], [True, "1.5", None]),
        ("string", ["", "x"], [1, None, ["x"]]),
        ("null", [None], [0, "", False]),
        ("array", [[], [1, "a"]], [{}, "[]", None]),
        ("object", [{}, {"a": 1}], [[], "{}", None]),
    ],
)
def test_kind_checks(type_name, good, bad) -> None:
    node = {"type": type_name}
    if type_name == "array":
        node["items"] = {"type": "any"}
    if type_name == "object":
        node["properties"] = {}
    for value in good:
        assert check_value(value, node) is None, value
    for value in bad:
        error = check_value(value, node)
        assert error is not None, value
        assert f"expected {type_name}" in error.message


def test_union_falls_back_to_later_candidates() -> None:
    assert check_value(None, {"type": ["string", "null"]}) is None
    assert check_value("x", {"type": ["string", "null"]}) is None


def test_union_outcome_is_order_independent() -> None:
    for value in ("x", None, 3):
        forward = check_value(value, {"type": ["string", "null"]})
        backward = check_value(value, {"type": ["null", "string"]})
        assert (forward is None) == (backward is None)


def test_union_exhaustion_lists_every_attempt() -> None:
    error = check_value(3, {"type": ["string", "null"]}, "nickname")
    assert error is not None
    assert error.path == "nickname"
    assert "string" in error.message and "null" in error.message
    assert [name for name, _ in error.causes] == ["string", "null"]


def test_union_uses_constraints_per_candidate() -> None:
    node = {"type": ["integer", "string"], "minimum": 10, "maxLength": 2}
    assert check_value(12, node) is None
    assert check_value("ab", node) is None
    assert check_value(5, node) is not None
    assert check_value("abc", node) is not None


def test_schema_defect_is_not_swallowed_by_union_retry() -> None:
    node = {"type": ["array", "null"]}
    with pytest.raises(SchemaError):
        check_value([1], node)
    # the defective candidate never runs when an earlier one matches
    assert check_value(None, {"type": ["null", "array"]}) is None


def test_single_type_surfaces_nested_error_path() -> None:
    node = {
        "type": "object",
        "properties": {
            "servers": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {"port": {"type": "integer", "maximum": 65535}},
                },
            }
        },
    }
    error = check_value({"servers": [{"port": 80}, {"port": 70000}]}, node)
    assert error is not None
    assert error.path == "servers[1].port"
    assert "greater than 65535" in error.message


def test_first_violation_follows_declaration_order() -> None:
    node = {
        "type": "object",
        "properties": {
            "b": {"type": "integer"},
            "a": {"type": "integer"},
        },
    }
    error = check_value({"a": "x", "b": "y"}, node)
    assert error is not None and error.path == "b"


def test_array_without_items_is_a_schema_defect_even_when_bounds_fail() -> None:
    with pytest.raises(SchemaError):
        check_value([1, 2, 3, 4], {"type": "array", "maxItems": 1})


def test_object_without_properties_is_a_schema_defect() -> None:
    with pytest.raises(SchemaError):
        check_value({}, {"type": "object"})
    # a kind mismatch is reported before the defect is noticed
    assert check_value("x", {"type": "object"}) is not None


def test_validation_is_deterministic() -> None:
    node = {"type": ["integer", "string"], "minimum": 3, "pattern": "^a"}
    outcomes = {str(check_value("b", node)) for _ in range(5)}
    assert len(outcomes) == 1


def test_required_omission_fails_regardless_of_siblings() -> None:
    node = {
        "type": "object",
        "properties": {
            "x": {"type": "integer", "required": True},
            "y": {"type": "integer"},
        },
    }
    for siblings in ({}, {"y": 1}, {"y": "bad"}, {"z": None}):
        error = check_value(siblings, node)
        assert error is not None
        assert error.path == "x"


def test_optional_omission_never_fails() -> None:
    node = {
        "type": "object",
        "properties": {
            "x": {"type": "integer"},
            "y": {"type": "integer", "required": False},
        },
    }
    for value in ({}, {"x": 1}, {"y": 2}, {"other": "anything"}):
        assert check_value(value, node) is None


def test_decoded_nan_is_rejected_by_numeric_types() -> None:
    node = {"type": "number", "minimum": 0, "maximum": 10}
    error = check_value(float("nan"), node, "ratio")
    assert error is not None
    assert error.path == "ratio"
    assert "NaN" in error.message
    assert check_value(float("nan"), {"type": "integer"}) is not None
    assert check_value(float("nan"), {"type": ["number", "null"]}) is not None
