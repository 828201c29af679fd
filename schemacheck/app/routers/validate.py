"""Document validation endpoint."""
from __future__ import annotations

import structlog
from fastapi import APIRouter, HTTPException

from schemacheck.errors import SchemaError
from schemacheck.models.api import ValidateRequest, ValidateResponse, ValidationErrorPayload
from schemacheck.observability import record_validation
from schemacheck.registry import resolve_schema

router = APIRouter(tags=["validate"])

LOGGER = structlog.get_logger(__name__)


@router.post("/validate/{schema_id}", response_model=ValidateResponse)
def validate_document(schema_id: str, payload: ValidateRequest) -> ValidateResponse:
    """Validate an already decoded document against a registered schema."""
    try:
        schema = resolve_schema(schema_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc

    try:
        error = schema.check_decoded(payload.document, payload.path)
    except SchemaError as exc:
        LOGGER.warning("schema_defect", schema=schema.name, error=str(exc))
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    record_validation(schema.name, error is None)
    if error is None:
        return ValidateResponse(schema_id=schema.name, path=payload.path, valid=True)

    details = error.to_dict()
    return ValidateResponse(
        schema_id=schema.name,
        path=payload.path,
        valid=False,
        error=ValidationErrorPayload(
            path=error.path,
            message=error.message,
            causes=details.get("causes", []),
        ),
    )
