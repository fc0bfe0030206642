"""structlog configuration for isolderthan.

Log lines always go to stderr; stdout carries only the verdict.
Each age check binds ``op`` and ``path`` through ``structlog.contextvars``
so every line it emits, including ones from stdlib loggers such as the
filesystem layer, names the file being checked.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Any

import structlog

APP_LOGGER = "isolderthan"


def _isoformat_instants(
    _logger: Any, _method: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Render datetime values as ISO-8601 strings with their UTC offset."""
    for key, value in event_dict.items():
        if isinstance(value, datetime):
            event_dict[key] = value.isoformat()
    return event_dict


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route isolderthan logs to stderr.

    Args:
        verbose: Emit DEBUG lines from the ``isolderthan`` loggers.
        log_json: One JSON object per line instead of console text.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _isoformat_instants,
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
