"""structlog wiring for the zenn-new-article command.

Every event goes to stderr; stdout carries only the ``✅ Created:`` /
``Would create:`` status line.  A terminal gets coloured key-value output,
anything else (pipes, CI) gets one JSON object per event.
"""
from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def _renderer(stream: TextIO) -> list[structlog.types.Processor]:
    if getattr(stream, "isatty", lambda: False)():
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]


def configure_logging(log_level: str = "WARNING") -> None:
    """Route structlog events for *log_level* and above to stderr.

    Safe to call more than once: the root handler is replaced, not stacked.
    Unknown level names fall back to WARNING.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)
    stream = sys.stderr

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            *_renderer(stream),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    """Return a bound structlog logger for *name*."""
    return structlog.get_logger(name)
