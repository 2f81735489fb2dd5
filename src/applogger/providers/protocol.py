"""Providers – LoggingProvider protocol and level shorthands."""
from __future__ import annotations

import abc
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from applogger.kernel.events import LogLevel


@runtime_checkable
class LoggingProvider(Protocol):
    """Port: a sink the dispatcher fans log calls out to.

    ``log`` decides admission and buffers synchronously; ``flush`` drains the
    whole buffer to the destination. The dispatcher reads
    ``flush_interval_seconds`` and ``last_flush_at`` to decide when a flush is
    due, and writes ``last_flush_at`` after it fires one.
    """

    flush_interval_seconds: float
    last_flush_at: datetime

    @property
    def min_level(self) -> LogLevel: ...

    def log(self, level: LogLevel | int, message: str, extra: Any = None) -> None: ...

    async def flush(self) -> None: ...


class LevelShortcutsMixin(abc.ABC):
    """``log_trace`` … ``log_critical`` forwarding to ``self.log``."""

    @abc.abstractmethod
    def log(self, level: LogLevel | int, message: str, extra: Any = None) -> None: ...

    def log_trace(self, message: str, extra: Any = None) -> None:
        self.log(LogLevel.TRACE, message, extra)

    def log_debug(self, message: str, extra: Any = None) -> None:
        self.log(LogLevel.DEBUG, message, extra)

    def log_info(self, message: str, extra: Any = None) -> None:
        self.log(LogLevel.INFO, message, extra)

    def log_warning(self, message: str, extra: Any = None) -> None:
        self.log(LogLevel.WARNING, message, extra)

    # common alias
    log_warn = log_warning

    def log_error(self, message: str, extra: Any = None) -> None:
        self.log(LogLevel.ERROR, message, extra)

    def log_critical(self, message: str, extra: Any = None) -> None:
        self.log(LogLevel.CRITICAL, message, extra)


__all__ = ["LevelShortcutsMixin", "LoggingProvider"]
