"""Schema aggregate: owns a decoded schema tree and validates values against it."""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Optional, Union

import structlog

from .core import check_value
from .errors import SchemaError, ValidationError
from .paths import SchemaNode, resolve

LOGGER = structlog.get_logger(__name__)

SchemaSource = Union[str, bytes, SchemaNode]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON number")


class Schema:
    """A JSON schema built from a JSON document or an already decoded tree.

    The tree is decoded on first use and never mutated, so one instance can
    back any number of concurrent validations.
    """

    def __init__(self, source: SchemaSource, name: Optional[str] = None) -> None:
        if not isinstance(source, (str, bytes, Mapping)):
            raise SchemaError(f"Unsupported schema source type {type(source).__name__}")
        self.name = name
        self._source = source
        self._tree: Optional[SchemaNode] = source if isinstance(source, Mapping) else None

    def __repr__(self) -> str:
        return f"Schema(name={self.name!r})"

    # ------------------------------------------------------------------
    def get_tree(self) -> SchemaNode:
        """Return the root schema node, decoding the source if needed."""
        if self._tree is None:
            try:
                tree = json.loads(self._source)
            except (TypeError, ValueError) as exc:
                raise SchemaError(f"Schema is not valid JSON: {exc}") from exc
            if not isinstance(tree, Mapping):
                raise SchemaError("Schema document must be a JSON object")
            self._tree = tree
        return self._tree

    def get_node_at_path(self, path: str = "") -> SchemaNode:
        """Return the schema node at the dotted ``path`` (root when empty)."""
        return resolve(self.get_tree(), path)

    # ------------------------------------------------------------------
    def check(self, value: Any, path: str = "") -> Optional[ValidationError]:
        """Return the first violation of ``value`` or ``None`` when it conforms.

        A ``str`` value is decoded as JSON first.
        """
        node = self.get_node_at_path(path)
        if isinstance(value, (str, bytes)):
            try:
                value = json.loads(value, parse_constant=_reject_constant)
            except (ValueError, RecursionError) as exc:
                return ValidationError("", f"value is not valid JSON: {exc}")
        return check_value(value, node, "")

    def check_decoded(self, value: Any, path: str = "") -> Optional[ValidationError]:
        """Like :meth:`check` but never decodes; strings are validated as strings."""
        return check_value(value, self.get_node_at_path(path), "")

    def validate(self, value: Any, path: str = "") -> None:
        """Raise :class:`ValidationError` unless ``value`` conforms."""
        error = self.check(value, path)
        if error is not None:
            LOGGER.debug(
                "validation_failed",
                schema=self.name,
                schema_path=path,
                path=error.path,
                message=error.message,
            )
            raise error

    def is_valid(self, value: Any, path: str = "") -> bool:
        return self.check(value, path) is None


def validate(value: Any, schema: Union[Schema, SchemaSource], path: str = "") -> None:
    """Validate ``value`` against ``schema``; convenience wrapper around :class:`Schema`."""
    if not isinstance(schema, Schema):
        schema = Schema(schema)
    schema.validate(value, path)


__all__ = ["Schema", "SchemaSource", "validate"]
