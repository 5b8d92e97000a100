"""Structured logging.

Loggers come from structlog and follow whatever configuration the host
application installed; this library never configures structlog or the stdlib
root logger itself.
"""

import structlog
from structlog.stdlib import BoundLogger


def get_logger(name: str) -> BoundLogger:
    """Get a structured logger, typically ``get_logger(__name__)``.

    Example:
        logger.warning("unknown_error_code", code="GONE", status=410)
        # Output: {"event": "unknown_error_code", "code": "GONE", "level": "warning", ...}
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
