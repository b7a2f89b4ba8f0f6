"""Core module exports."""

from explicate.core.errors import (
    ConfigError,
    ErrorCode,
    ExplicateError,
    InternalError,
    RewriteError,
)
from explicate.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "ExplicateError",
    "InternalError",
    "RewriteError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
]
