"""Turn httpx responses into classified errors.

The caller sends the request; these helpers only read the response that came
back. Bodies come in three shapes:

- structured: {"error": ..., "status": ..., "code": ...}
- legacy: {"error": "message"} with the status only on the transport
- anything else (HTML error pages, empty bodies, non-error JSON)
"""

from collections.abc import Mapping
from json import JSONDecodeError

import httpx

from connect_errors.classified import ClassifiedError, is_error_response
from connect_errors.config import settings
from connect_errors.exceptions import exception_for
from connect_errors.logging import get_logger

logger = get_logger(__name__)


def _decode_body(response: httpx.Response) -> object:
    # Streamed responses the caller has not read are classified without a body
    try:
        return response.json()
    except (JSONDecodeError, UnicodeDecodeError, httpx.ResponseNotRead):
        return None


def error_from_response(response: httpx.Response) -> ClassifiedError | None:
    """Classify an error response, or return None for a successful one."""
    if response.status_code < 400:
        return None

    body = _decode_body(response)
    if is_error_response(body):
        error = ClassifiedError.from_response(body)
    elif isinstance(body, Mapping) and "error" in body:
        # Legacy envelope carries no status field
        error = ClassifiedError.from_response({**body, "status": response.status_code})
    else:
        error = ClassifiedError(message=response.reason_phrase, status=response.status_code)

    if settings.warn_on_unknown_code and error.code is not None and error.known_code is None:
        logger.warning("unknown_error_code", code=error.code, status=error.status)

    return error


def raise_for_error_response(response: httpx.Response) -> None:
    """Raise the matching ApiError subclass if ``response`` is an error."""
    error = error_from_response(response)
    if error is not None:
        raise exception_for(error)
