"""Dotted paths: building them during recursion and resolving them in a schema tree."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List

from .errors import MalformedPathError, PathNotFoundError, SchemaError

SchemaNode = Mapping


def join_property(parent: str, name: str) -> str:
    return f"{parent}.{name}" if parent else name


def join_index(parent: str, index: int) -> str:
    return f"{parent}[{index}]"


def split_path(path: str) -> List[str]:
    """Split ``path`` into segments, rejecting empty ones."""
    if not path:
        return []
    segments = path.split(".")
    if any(not segment for segment in segments):
        raise MalformedPathError(f"Malformed schema path '{path}'", path)
    return segments


def resolve(schema: SchemaNode, path: str) -> SchemaNode:
    """Return the sub-schema of ``schema`` addressed by the dotted ``path``.

    Nodes typed ``object`` are transparent: the walk steps into their
    ``properties`` before consuming the next segment. Any other node is
    treated as a plain mapping of names to sub-schemas, which supports
    documents whose root is a bare properties map.
    """
    node: Any = schema
    walked: List[str] = []
    for segment in split_path(path):
        if isinstance(node, Mapping) and node.get("type") == "object":
            properties = node.get("properties")
            if not isinstance(properties, Mapping):
                raise SchemaError(
                    "Object schema does not define properties", ".".join(walked)
                )
            node = properties
        if not isinstance(node, Mapping) or segment not in node:
            location = ".".join(walked) or "<root>"
            raise PathNotFoundError(
                f"No schema node named '{segment}' under {location}", path
            )
        node = node[segment]
        walked.append(segment)
    if not isinstance(node, Mapping):
        raise SchemaError("Schema node is not an object", path)
    return node


__all__ = [
    "SchemaNode",
    "join_index",
    "join_property",
    "resolve",
    "split_path",
]
