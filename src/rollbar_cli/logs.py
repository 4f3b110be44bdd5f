"""Structured logging configuration using structlog.

Logs always go to stderr: stdout is reserved for the JSON a command prints.
"""

from __future__ import annotations

import sys

import structlog

LEVELS = {"debug": 10, "info": 20, "warning": 30, "warn": 30, "error": 40, "critical": 50}


def setup_logging(level: str = "WARNING", fmt: str = "console") -> None:
    """Configure structlog.

    Args:
        level: Level name (case-insensitive). Unknown names fall back to WARNING.
        fmt: ``"json"`` for one JSON object per line, anything else for the
            human-readable console renderer.
    """
    if fmt == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LEVELS.get(level.lower(), 30)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, optionally bound to a component name.

    The logger stays lazy: module-level loggers pick up whatever
    ``setup_logging`` configured by the time they first log.
    """
    if name:
        return structlog.get_logger(component=name)  # type: ignore[no-any-return]
    return structlog.get_logger()  # type: ignore[no-any-return]
