"""Logging setup built on the standard library and structlog rendering."""

import logging
import sys
from typing import Optional

import structlog

_configured = False


def setup_logging(level: str = "INFO", log_format: str = "console", stream=None) -> None:
    """
    Set up structured logging for the package.

    Records from standard library loggers are rendered by structlog, so
    ``%``-style calls made through LoggingAdapter keep working.

    :param level: Logging level (e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :param log_format: "console" for human readable output, "json" for one JSON object per line.
    :param stream: Output stream, defaults to stderr.
    """
    global _configured

    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
        shared_processors.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    if _configured:
        for existing in list(root.handlers):
            if getattr(existing, "_awsbind", False):
                root.removeHandler(existing)
    handler._awsbind = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a standard library logger under the package namespace."""
    return logging.getLogger(name or "awsbind")
