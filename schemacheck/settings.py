"""Runtime settings for the schema validation service."""
from __future__ import annotations

import os
from pathlib import Path
from types import SimpleNamespace

ROOT = Path(__file__).resolve().parents[1]


def _comma_separated_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _compute_schema_dir() -> Path:
    override = os.getenv("SCHEMA_DIR")
    if override:
        return Path(override).expanduser().resolve()
    return ROOT / "config" / "schemas"


ENVIRONMENT = os.getenv("ENVIRONMENT", os.getenv("ENV", "development")).strip().lower()
ALLOWED_CORS_ORIGINS = _comma_separated_list(os.getenv("ALLOWED_ORIGINS"))

SCHEMA_DIR = _compute_schema_dir()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

MAX_PAYLOAD_BYTES = int(os.getenv("MAX_PAYLOAD_BYTES", str(1024 * 1024)))

RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", "30"))
RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

settings = SimpleNamespace(
    ENVIRONMENT=ENVIRONMENT,
    ALLOWED_ORIGINS=ALLOWED_CORS_ORIGINS,
    ALLOWED_CORS_ORIGINS=ALLOWED_CORS_ORIGINS,
    SCHEMA_DIR=SCHEMA_DIR,
    LOG_LEVEL=LOG_LEVEL,
    MAX_PAYLOAD_BYTES=MAX_PAYLOAD_BYTES,
    RATE_LIMIT_REQUESTS=RATE_LIMIT_REQUESTS,
    RATE_LIMIT_WINDOW_SECONDS=RATE_LIMIT_WINDOW_SECONDS,
)

__all__ = [
    "ENVIRONMENT",
    "ALLOWED_CORS_ORIGINS",
    "SCHEMA_DIR",
    "LOG_LEVEL",
    "MAX_PAYLOAD_BYTES",
    "RATE_LIMIT_REQUESTS",
    "RATE_LIMIT_WINDOW_SECONDS",
    "settings",
]
