"""Structured logging configuration using structlog."""

import logging as stdlib_logging
import sys
from typing import Any

import structlog


def configure_logging(level: str = "WARNING", json_output: bool = False) -> None:
    """Route pidprobe's structured events to stderr.

    stdout is shared by the banners and the analysis tool's own output, so
    log lines must never land there. Each call replaces the previous
    configuration; the CLI calls it once at import and again for -v/-vv.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        json_output: Emit one JSON object per line instead of coloured text.
    """
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(stdlib_logging, level.upper(), stdlib_logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Return a logger; ``name`` is usually the calling module's ``__name__``."""
    return structlog.get_logger(name)
