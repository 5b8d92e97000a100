"""Classified errors.

ClassifiedError is an immutable value built from an error response. Calling
code branches on its predicates (redirect to login, show a toast, retry)
instead of inspecting raw codes and status numbers.

    body = response.json()
    if is_error_response(body):
        error = ClassifiedError.from_response(body)
        if error.requires_reauth():
            ...
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeGuard

from connect_errors.codes import ErrorCategory, ErrorCode, category_of, parse_code
from connect_errors.codes import user_message as code_message
from connect_errors.config import settings
from connect_errors.schemas.error import ErrorResponse

_PERMISSION_CODES = frozenset({ErrorCode.PERMISSION_DENIED, ErrorCode.INSUFFICIENT_PERMISSIONS})
_NOT_FOUND_CODES = frozenset({ErrorCode.NOT_FOUND, ErrorCode.MEMBERSHIP_NOT_FOUND})
_REAUTH_CODES = frozenset(
    {ErrorCode.TOKEN_EXPIRED, ErrorCode.POLICY_VERSION_MISMATCH, ErrorCode.TOKEN_INVALID}
)
_VALIDATION_CODES = frozenset(
    {
        ErrorCode.VALIDATION_ERROR,
        ErrorCode.INVALID_FORMAT,
        ErrorCode.MISSING_REQUIRED_FIELD,
        ErrorCode.OUT_OF_RANGE,
    }
)
_RETRYABLE_CODES = frozenset(
    {ErrorCode.RATE_LIMIT_EXCEEDED, ErrorCode.SERVICE_UNAVAILABLE, ErrorCode.TIMEOUT}
)


def is_error_response(value: object) -> TypeGuard[Mapping[str, Any] | ErrorResponse]:
    """Return True if ``value`` has the shape of an error response.

    Only the presence of the ``error`` and ``status`` keys is checked; their
    types are not, so ``{"error": 1, "status": "x"}`` passes.
    """
    if isinstance(value, ErrorResponse):
        return True
    return isinstance(value, Mapping) and "error" in value and "status" in value


@dataclass(frozen=True)
class ClassifiedError:
    """Read-only view of an error response with classification helpers.

    ``code`` is an ErrorCode for known codes. Codes this client does not know
    are kept as the raw string, and None means the backend sent no code.
    """

    message: str
    status: int
    code: ErrorCode | str | None = None
    detail: str | None = None
    meta: Mapping[str, Any] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        # meta is a read-only copy, detached from the caller's dict
        if isinstance(self.meta, Mapping):
            object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    @classmethod
    def from_response(cls, response: ErrorResponse | Mapping[str, Any]) -> "ClassifiedError":
        """Wrap an error response. Never validates or raises on field types."""
        if isinstance(response, ErrorResponse):
            return cls(
                message=response.error,
                status=response.status,
                code=response.code,
                detail=response.detail,
                meta=response.meta,
            )

        raw_code = response.get("code")
        return cls(
            message=response.get("error"),  # type: ignore[arg-type]
            status=response.get("status"),  # type: ignore[arg-type]
            code=parse_code(raw_code) or raw_code,
            detail=response.get("detail"),
            meta=response.get("meta"),
        )

    @property
    def known_code(self) -> ErrorCode | None:
        """The code as an ErrorCode, or None when absent or unknown."""
        return parse_code(self.code)

    def is_code(self, code: ErrorCode | str) -> bool:
        return self.code == code

    def is_permission_error(self) -> bool:
        return self.known_code in _PERMISSION_CODES

    def is_membership_not_found(self) -> bool:
        return self.known_code is ErrorCode.MEMBERSHIP_NOT_FOUND

    def is_not_found(self) -> bool:
        return self.known_code in _NOT_FOUND_CODES

    def requires_reauth(self) -> bool:
        """True when the session must be re-established (expired, invalid, stale policy)."""
        return self.known_code in _REAUTH_CODES

    def is_validation_error(self) -> bool:
        return self.known_code in _VALIDATION_CODES

    def is_server_error(self) -> bool:
        return isinstance(self.status, int) and 500 <= self.status < 600

    def is_retryable(self) -> bool:
        """True for failures that may succeed if the request is repeated later."""
        return self.is_server_error() or self.known_code in _RETRYABLE_CODES

    def category(self) -> ErrorCategory | None:
        code = self.known_code
        return category_of(code) if code is not None else None

    def user_message(self, fallback: str | None = None) -> str:
        """Message safe to show to an end user.

        Known codes map to a fixed sentence. Otherwise the backend's message
        is used, then ``fallback``, then a generic sentence.
        """
        code = self.known_code
        if code is not None:
            return code_message(code)
        return self.message or fallback or settings.fallback_message

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for structured logging. ``meta`` is copied one level deep only."""
        return {
            "name": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "status": self.status,
            "detail": self.detail,
            "meta": dict(self.meta) if isinstance(self.meta, Mapping) else self.meta,
        }


def is_classified_error(value: object) -> TypeGuard[ClassifiedError]:
    """Return True only for ClassifiedError instances (not dicts or other exceptions)."""
    return isinstance(value, ClassifiedError)
