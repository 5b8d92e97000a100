"""Error codes shared with the backend.

Values are stable wire identifiers and must match the backend's ErrorCode
constants. Every lookup below is a ``match`` ending in ``assert_never`` so
mypy reports a missing case when a member is added to ErrorCode.
"""

from enum import StrEnum
from typing import assert_never


class ErrorCode(StrEnum):
    """Programmatic error codes carried in the ``code`` field of an error response."""

    # Authentication & Authorization
    UNAUTHORIZED = "UNAUTHORIZED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"
    POLICY_VERSION_MISMATCH = "POLICY_VERSION_MISMATCH"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"

    # Resource
    NOT_FOUND = "NOT_FOUND"
    MEMBERSHIP_NOT_FOUND = "MEMBERSHIP_NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    CONFLICT = "CONFLICT"
    RESOURCE_LOCKED = "RESOURCE_LOCKED"

    # Validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    BAD_REQUEST = "BAD_REQUEST"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"
    OUT_OF_RANGE = "OUT_OF_RANGE"

    # Server
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    TIMEOUT = "TIMEOUT"

    # Business logic
    OPERATION_NOT_ALLOWED = "OPERATION_NOT_ALLOWED"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"


class ErrorCategory(StrEnum):
    """Coarse grouping of error codes."""

    AUTH = "AUTH"
    RESOURCE = "RESOURCE"
    VALIDATION = "VALIDATION"
    SERVER = "SERVER"
    BUSINESS = "BUSINESS"


def parse_code(value: object) -> ErrorCode | None:
    """Return the ErrorCode for a known code string, else None."""
    if isinstance(value, ErrorCode):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ErrorCode(value)
    except ValueError:
        return None


def category_of(code: ErrorCode) -> ErrorCategory:
    match code:
        case (
            ErrorCode.UNAUTHORIZED
            | ErrorCode.TOKEN_EXPIRED
            | ErrorCode.TOKEN_INVALID
            | ErrorCode.POLICY_VERSION_MISMATCH
            | ErrorCode.PERMISSION_DENIED
            | ErrorCode.INSUFFICIENT_PERMISSIONS
        ):
            return ErrorCategory.AUTH
        case (
            ErrorCode.NOT_FOUND
            | ErrorCode.MEMBERSHIP_NOT_FOUND
            | ErrorCode.ALREADY_EXISTS
            | ErrorCode.CONFLICT
            | ErrorCode.RESOURCE_LOCKED
        ):
            return ErrorCategory.RESOURCE
        case (
            ErrorCode.VALIDATION_ERROR
            | ErrorCode.INVALID_REQUEST
            | ErrorCode.BAD_REQUEST
            | ErrorCode.MISSING_REQUIRED_FIELD
            | ErrorCode.INVALID_FORMAT
            | ErrorCode.OUT_OF_RANGE
        ):
            return ErrorCategory.VALIDATION
        case (
            ErrorCode.INTERNAL_ERROR
            | ErrorCode.DATABASE_ERROR
            | ErrorCode.SERVICE_UNAVAILABLE
            | ErrorCode.TIMEOUT
        ):
            return ErrorCategory.SERVER
        case (
            ErrorCode.OPERATION_NOT_ALLOWED
            | ErrorCode.QUOTA_EXCEEDED
            | ErrorCode.RATE_LIMIT_EXCEEDED
        ):
            return ErrorCategory.BUSINESS
        case _:
            assert_never(code)


def default_http_status(code: ErrorCode) -> int:
    """HTTP status the backend sends by default for ``code``.

    Handlers on the backend may override it, so a response's own ``status``
    always wins over this value.
    """
    match code:
        case (
            ErrorCode.UNAUTHORIZED
            | ErrorCode.TOKEN_EXPIRED
            | ErrorCode.TOKEN_INVALID
            | ErrorCode.POLICY_VERSION_MISMATCH
        ):
            return 401
        case (
            ErrorCode.PERMISSION_DENIED
            | ErrorCode.INSUFFICIENT_PERMISSIONS
            | ErrorCode.OPERATION_NOT_ALLOWED
        ):
            return 403
        case ErrorCode.NOT_FOUND | ErrorCode.MEMBERSHIP_NOT_FOUND:
            return 404
        case ErrorCode.ALREADY_EXISTS | ErrorCode.CONFLICT | ErrorCode.RESOURCE_LOCKED:
            return 409
        case (
            ErrorCode.VALIDATION_ERROR
            | ErrorCode.INVALID_REQUEST
            | ErrorCode.BAD_REQUEST
            | ErrorCode.MISSING_REQUIRED_FIELD
            | ErrorCode.INVALID_FORMAT
            | ErrorCode.OUT_OF_RANGE
        ):
            return 400
        case ErrorCode.RATE_LIMIT_EXCEEDED:
            return 429
        case ErrorCode.SERVICE_UNAVAILABLE:
            return 503
        case ErrorCode.TIMEOUT:
            return 504
        case ErrorCode.INTERNAL_ERROR | ErrorCode.DATABASE_ERROR | ErrorCode.QUOTA_EXCEEDED:
            return 500
        case _:
            assert_never(code)


def user_message(code: ErrorCode) -> str:
    """Friendly, display-ready sentence for ``code``."""
    match code:
        case ErrorCode.UNAUTHORIZED:
            return "You need to be logged in"
        case ErrorCode.TOKEN_EXPIRED:
            return "Your session has expired"
        case ErrorCode.TOKEN_INVALID:
            return "Your session is invalid"
        case ErrorCode.POLICY_VERSION_MISMATCH:
            return "Please log in again"
        case ErrorCode.PERMISSION_DENIED:
            return "You don't have permission for this action"
        case ErrorCode.INSUFFICIENT_PERMISSIONS:
            return "Insufficient permissions"
        case ErrorCode.NOT_FOUND:
            return "Resource not found"
        case ErrorCode.MEMBERSHIP_NOT_FOUND:
            return "You don't have access to this resource"
        case ErrorCode.ALREADY_EXISTS:
            return "Resource already exists"
        case ErrorCode.CONFLICT:
            return "Conflict with current state"
        case ErrorCode.RESOURCE_LOCKED:
            return "Resource is locked"
        case ErrorCode.VALIDATION_ERROR:
            return "Invalid data provided"
        case ErrorCode.INVALID_REQUEST:
            return "Invalid request"
        case ErrorCode.BAD_REQUEST:
            return "Bad request"
        case ErrorCode.MISSING_REQUIRED_FIELD:
            return "Required field is missing"
        case ErrorCode.INVALID_FORMAT:
            return "Invalid format"
        case ErrorCode.OUT_OF_RANGE:
            return "Value out of range"
        case ErrorCode.INTERNAL_ERROR:
            return "An internal error occurred"
        case ErrorCode.DATABASE_ERROR:
            return "Database error occurred"
        case ErrorCode.SERVICE_UNAVAILABLE:
            return "Service temporarily unavailable"
        case ErrorCode.TIMEOUT:
            return "Operation timed out"
        case ErrorCode.OPERATION_NOT_ALLOWED:
            return "Operation not allowed"
        case ErrorCode.QUOTA_EXCEEDED:
            return "Quota exceeded"
        case ErrorCode.RATE_LIMIT_EXCEEDED:
            return "Too many requests"
        case _:
            assert_never(code)
