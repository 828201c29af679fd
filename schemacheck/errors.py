"""Error taxonomy for schema defects and value conformance failures."""
from __future__ import annotations

from typing import Dict, Sequence, Tuple


class SchemaCheckError(Exception):
    """Base class for every error raised by the validator."""


class SchemaError(SchemaCheckError):
    """The schema document itself is malformed or unsupported."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class MalformedPathError(SchemaError):
    """A schema path has a leading/trailing dot or an empty segment."""


class PathNotFoundError(SchemaError):
    """A schema path does not lead to a node."""


class ValidationError(SchemaCheckError):
    """A value does not conform to its schema node."""

    def __init__(
        self,
        path: str,
        message: str,
        causes: Sequence[Tuple[str, "ValidationError"]] = (),
    ) -> None:
        super().__init__(message)
        self.path = path
        self.message = message
        self.causes = tuple(causes)

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.message}"

    def __repr__(self) -> str:
        return f"ValidationError(path={self.path!r}, message={self.message!r})"

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"path": self.path, "message": self.message}
        if self.causes:
            payload["causes"] = [
                {"type": label, **error.to_dict()} for label, error in self.causes
            ]
        return payload


__all__ = [
    "MalformedPathError",
    "PathNotFoundError",
    "SchemaCheckError",
    "SchemaError",
    "ValidationError",
]
