"""Error response schema.

The backend sends every error as a flat envelope:
{"error": "...", "code": "...", "status": 404, "detail": "...", "meta": {...}}.
``code``, ``detail`` and ``meta`` are omitted when empty; legacy endpoints
send no ``code`` at all.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from connect_errors.codes import ErrorCode


class ErrorResponse(BaseModel):
    """Structured error payload as received from the backend.

    Validating a body through this model is the strict path: a wrong type or
    an unknown ``code`` raises ``pydantic.ValidationError``. Use
    ``connect_errors.classified.is_error_response`` for the permissive check.
    """

    model_config = ConfigDict(extra="ignore")

    error: str  # Short human-readable message
    code: ErrorCode | None = None
    status: int
    detail: str | None = None
    meta: dict[str, Any] | None = None
