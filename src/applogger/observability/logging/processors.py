"""Observability – structlog processor chain and get_logger helper.

The library reports its own problems (failed flushes, skipped ticks, …) through
structlog loggers that wrap stdlib :mod:`logging` loggers under the
``applogger`` namespace. Nothing is printed unless the host application
configures logging (or calls :meth:`DiagnosticsLoggerFactory.configure`), and
nothing ever goes to stdout, which belongs to the console provider.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

LOGGER_NAMESPACE = "applogger"

_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
    structlog.processors.KeyValueRenderer(key_order=["event", "level", "timestamp"]),
]


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger for *name* inside the ``applogger`` namespace.

    Parameters
    ----------
    name:
        Logger name, typically ``__name__`` of the calling module.
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    if not name:
        name = LOGGER_NAMESPACE
    elif name != LOGGER_NAMESPACE and not name.startswith(LOGGER_NAMESPACE + "."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["LOGGER_NAMESPACE", "get_logger"]
