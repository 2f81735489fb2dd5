"""Observability – DiagnosticsLoggerFactory."""
from __future__ import annotations

import logging
import sys
from typing import TextIO

from applogger.observability.logging.processors import LOGGER_NAMESPACE


class DiagnosticsLoggerFactory:
    """Route the library's diagnostics to a stream (stderr by default)."""

    _HANDLER_NAME = "applogger.diagnostics"

    @classmethod
    def configure(cls, level: int = logging.WARNING, stream: TextIO | None = None) -> logging.Handler:
        """Attach (or replace) the diagnostics handler and set *level*.

        Safe to call more than once; the previous handler is removed first.
        """
        root = logging.getLogger(LOGGER_NAMESPACE)
        cls.reset()
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.set_name(cls._HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
        root.setLevel(level)
        return handler

    @classmethod
    def reset(cls) -> None:
        """Remove the diagnostics handler installed by :meth:`configure`."""
        root = logging.getLogger(LOGGER_NAMESPACE)
        for handler in list(root.handlers):
            if handler.get_name() == cls._HANDLER_NAME:
                root.removeHandler(handler)


__all__ = ["DiagnosticsLoggerFactory"]
