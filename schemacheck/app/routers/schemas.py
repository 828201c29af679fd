"""Schema registry endpoints."""
from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, HTTPException, Query

from schemacheck.errors import SchemaError
from schemacheck.models.api import SchemaSummaryModel
from schemacheck.registry import resolve_schema, schema_summaries

router = APIRouter(tags=["schemas"])


@router.get("/schemas", response_model=List[SchemaSummaryModel])
def list_schemas():
    """Return lightweight summaries of every registered schema."""
    return schema_summaries()


@router.get("/schemas/{schema_id}")
def get_schema(schema_id: str, path: str = Query(default="")) -> Dict[str, object]:
    """Return the schema node at ``path`` within a registered schema."""
    try:
        schema = resolve_schema(schema_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc
    try:
        node = schema.get_node_at_path(path)
    except SchemaError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"schema_id": schema.name, "path": path, "schema": node}
