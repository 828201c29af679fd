from __future__ import annotations

import pytest

from schemacheck.errors import MalformedPathError, PathNotFoundError, SchemaError
from schemacheck.paths import join_index, join_property, resolve

TREE = {
    "type": "object",
    "properties": {
        "server": {
            "type": "object",
            "properties": {
                "port": {"type": "integer"},
                "tls": {"type": "object", "properties": {"cert": {"type": "string"}}},
            },
        },
        "tags": {"type": "array", "items": {"type": "string"}},
    },
}


def test_empty_path_returns_root() -> None:
    assert resolve(TREE, "") is TREE


def test_object_nodes_are_transparent() -> None:
    assert resolve(TREE, "server.port") == {"type": "integer"}
    assert resolve(TREE, "server.tls.cert") == {"type": "string"}


def test_bare_properties_map_root() -> None:
    bare = {"name": {"type": "string"}, "meta": {"type": "object", "properties": {"id": {"type": "integer"}}}}
    assert resolve(bare, "name") == {"type": "string"}
    assert resolve(bare, "meta.id") == {"type": "integer"}


def test_resolution_composes_over_segments() -> None:
    assert resolve(TREE, "server.tls.cert") == resolve(resolve(TREE, "server"), "tls.cert")
    assert resolve(TREE, "server.tls") == resolve(resolve(TREE, "server"), "tls")


@pytest.mark.parametrize("path", [".server", "server.", "server..port", "."])
def test_malformed_paths(path: str) -> None:
    with pytest.raises(MalformedPathError):
        resolve(TREE, path)


def test_missing_segment_is_not_found() -> None:
    with pytest.raises(PathNotFoundError) as excinfo:
        resolve(TREE, "server.missing")
    assert "missing" in str(excinfo.value)
    assert isinstance(excinfo.value, SchemaError)


def test_object_without_properties_is_a_schema_defect() -> None:
    with pytest.raises(SchemaError):
        resolve({"type": "object"}, "anything")


def test_non_object_keys_are_looked_up_directly() -> None:
    # "tags" is an array node, so its keys are addressed directly.
    assert resolve(TREE, "tags.items") == {"type": "string"}


def test_path_builders() -> None:
    assert join_property("", "a") == "a"
    assert join_property("a", "b") == "a.b"
    assert join_index("a", 2) == "a[2]"
    assert join_index("", 0) == "[0]"
