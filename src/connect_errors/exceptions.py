"""Exceptions for callers that prefer raising over branching.

ClassifiedError is a plain value. When an error response should abort the
current flow, raise_for_error_response() wraps it in one of these so callers
can catch by kind:

    try:
        raise_for_error_response(response)
    except ReauthRequiredError:
        redirect_to_login()
    except ApiError as exc:
        show_toast(exc.error.user_message())
"""

from connect_errors.classified import ClassifiedError
from connect_errors.codes import ErrorCode


class ApiError(Exception):
    """Base class for all errors raised from a backend error response."""

    def __init__(self, error: ClassifiedError) -> None:
        self.error = error
        super().__init__(error.message)

    @property
    def status(self) -> int:
        return self.error.status

    @property
    def code(self) -> ErrorCode | str | None:
        return self.error.code


class ReauthRequiredError(ApiError):
    """Raised when the session is expired, invalid or issued under an old policy."""


class PermissionDeniedError(ApiError):
    """Raised when the user lacks a permission for the requested action."""


class NotFoundError(ApiError):
    """Raised when a resource or the user's membership in a scope does not exist."""


class RequestValidationError(ApiError):
    """Raised when the backend rejected the request data."""


class ServerError(ApiError):
    """Raised for 5xx responses."""


def exception_for(error: ClassifiedError) -> ApiError:
    """Pick the most specific exception type for ``error``.

    Checked in order: re-auth, permission, not found, validation, server.
    Anything else gets the ApiError base.
    """
    if error.requires_reauth():
        return ReauthRequiredError(error)
    if error.is_permission_error():
        return PermissionDeniedError(error)
    if error.is_not_found():
        return NotFoundError(error)
    if error.is_validation_error():
        return RequestValidationError(error)
    if error.is_server_error():
        return ServerError(error)
    return ApiError(error)
