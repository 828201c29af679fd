"""Pydantic models for the validation HTTP API."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SchemaSummaryModel(BaseModel):
    """Registry entry returned by GET /api/schemas."""

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    valid: bool = True


class ValidateRequest(BaseModel):
    """Document submitted for validation against a registered schema."""

    document: Any = Field(..., description="Decoded JSON document to validate")
    path: str = Field(default="", description="Dotted schema path to validate against")


class ValidationErrorPayload(BaseModel):
    path: str
    message: str
    causes: List[Dict[str, Any]] = Field(default_factory=list)


class ValidateResponse(BaseModel):
    """Outcome of POST /api/validate/{schema_id}."""

    schema_id: str
    path: str
    valid: bool
    error: Optional[ValidationErrorPayload] = None


__all__ = [
    "SchemaSummaryModel",
    "ValidateRequest",
    "ValidateResponse",
    "ValidationErrorPayload",
]
