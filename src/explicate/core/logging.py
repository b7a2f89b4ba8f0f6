"""structlog setup for rewrite runs.

Events go through stdlib logging so each configured output owns one
handler with its own level and renderer. Every event emitted while a
compilation unit is rewritten carries that unit's ``request_id``.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from explicate.config.models import LoggingConfig, LogOutputConfig

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    return _request_id.get()


def set_request_id(request_id: str | None = None) -> str:
    """Start correlating events with one unit; generates an id if none given."""
    rid = request_id or uuid4().hex[:12]
    _request_id.set(rid)
    return rid


def clear_request_id() -> None:
    _request_id.set(None)


def _inject_request_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := _request_id.get():
        event_dict.setdefault("request_id", rid)
    return event_dict


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        _inject_request_id,  # type: ignore[list-item]
    ]


def _open_stream(destination: str) -> logging.Handler:
    if destination in ("stderr", "stdout"):
        return logging.StreamHandler(getattr(sys, destination))
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _output_handler(
    output: LogOutputConfig,
    default_level: str,
    pre_chain: list[structlog.types.Processor],
) -> logging.Handler:
    if output.format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False, pad_event_to=0)

    handler = _open_stream(output.destination)
    handler.setLevel(output.level or default_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)
    )
    return handler


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Route structlog events to the outputs of ``config``.

    Replaces any handlers already on the root logger, so calling it again
    with a different config takes effect immediately.
    """
    from explicate.config.models import LoggingConfig

    config = config or LoggingConfig()
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(config.level)),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    root.setLevel(config.level)
    for output in config.outputs:
        root.addHandler(_output_handler(output, config.level, pre_chain))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Lazy logger: module-level loggers follow later ``configure_logging`` calls."""
    if name:
        return structlog.get_logger(name)  # type: ignore[no-any-return]
    return structlog.get_logger()  # type: ignore[no-any-return]
