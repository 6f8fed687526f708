"""Structured logging configuration using structlog.

Library code logs through ``get_logger(__name__)``. Events are routed into
the standard library ``logging`` module, so an application that never calls
``configure_logging`` only sees warnings, via logging's last-resort handler.
The CLI calls ``configure_logging`` to pick the level.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(verbose: bool = False, stream: Any = None) -> None:
    """Configure log level and destination.

    Args:
        verbose: Emit debug events when True, warnings and above otherwise.
        stream: Output stream. Defaults to stderr so log lines never mix
            with diagnostics written to stdout.
    """
    _configure_structlog()
    logging.basicConfig(
        format="%(message)s",
        stream=stream if stream is not None else sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        force=True,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("rule_added", error_id="nullPointer")
    """
    return structlog.get_logger(name)


if not structlog.is_configured():
    _configure_structlog()
