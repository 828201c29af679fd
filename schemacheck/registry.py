"""Load schema documents from disk and expose lookup helpers."""
from __future__ import annotations

from difflib import get_close_matches
from pathlib import Path
from typing import Dict, List

import structlog

from .errors import SchemaError
from .schema import Schema
from .settings import SCHEMA_DIR

LOGGER = structlog.get_logger(__name__)

SchemaSummary = Dict[str, object]

_by_id: Dict[str, Schema] = {}
_by_id_lower: Dict[str, Schema] = {}


def _load_schemas(directory: Path) -> Dict[str, Schema]:
    schemas: Dict[str, Schema] = {}
    if not directory.is_dir():
        LOGGER.warning("schema_dir_missing", directory=str(directory))
        return schemas
    for path in sorted(directory.glob("*.json")):
        if path.name.startswith("_"):
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            LOGGER.warning("schema_unreadable", file=str(path), error=str(exc))
            continue
        schemas[path.stem] = Schema(text, name=path.stem)
    return schemas


def reload_registry(directory: Path | None = None) -> None:
    """Reload schema documents from ``directory`` (defaults to ``SCHEMA_DIR``)."""
    global _by_id, _by_id_lower
    target = Path(directory) if directory is not None else SCHEMA_DIR
    _by_id = _load_schemas(target)
    _by_id_lower = {key.lower(): value for key, value in _by_id.items()}
    LOGGER.info("schemas_loaded", directory=str(target), count=len(_by_id))


def schema_ids() -> List[str]:
    return sorted(_by_id)


def schema_summaries() -> List[SchemaSummary]:
    summaries: List[SchemaSummary] = []
    for identifier in schema_ids():
        schema = _by_id[identifier]
        try:
            tree = schema.get_tree()
        except SchemaError as exc:
            LOGGER.warning("schema_invalid", schema=identifier, error=str(exc))
            summaries.append({"id": identifier, "title": None, "description": None, "valid": False})
            continue
        summaries.append(
            {
                "id": identifier,
                "title": tree.get("title"),
                "description": tree.get("description"),
                "valid": True,
            }
        )
    return summaries


def resolve_schema(name_or_id: str) -> Schema:
    if not name_or_id:
        raise KeyError("Schema identifier cannot be empty")
    token = name_or_id.strip().lower()
    direct = _by_id_lower.get(token)
    if direct:
        return direct
    matches = get_close_matches(token, list(_by_id_lower), n=1, cutoff=0.8)
    if matches:
        return _by_id_lower[matches[0]]
    raise KeyError(f"Schema '{name_or_id}' was not found in the registry")


def load_schema_file(path: Path) -> Schema:
    """Build a :class:`Schema` from a standalone JSON file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"Unable to read schema file '{path}': {exc}") from exc
    return Schema(text, name=Path(path).stem)


# Initial load during module import.
reload_registry()

__all__ = [
    "SchemaSummary",
    "load_schema_file",
    "reload_registry",
    "resolve_schema",
    "schema_ids",
    "schema_summaries",
]
