"""Structured logging via structlog for host applications.

The package itself logs through ``logging.getLogger(__name__)``. Hosts
that want structured output call `configure_structlog()` once at startup;
the stdlib bridge then routes the package's records through the same
stream.

Renderer selection:
  debug=True   `ConsoleRenderer` with colours for local development.
  debug=False  `JSONRenderer` for machine-parseable logs.

Context bound with ``structlog.contextvars.bind_contextvars`` (for
example the installation home a discovery pass is working on) is merged
into every event.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog


def configure_structlog(debug: bool = True, level: Optional[int] = None) -> None:
    """Configure structlog for the process lifetime.

    level defaults to DEBUG when debug is set, INFO otherwise.
    Calling multiple times is safe; the last call wins.
    """
    if level is None:
        level = logging.DEBUG if debug else logging.INFO

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    processors.append(
        structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
