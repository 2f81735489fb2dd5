"""Providers – LogBuffer, the admission and buffering logic every provider composes."""
from __future__ import annotations

import threading
from datetime import datetime
from typing import Any

from applogger.kernel.events import LogEvent, LogLevel
from applogger.kernel.time import Clock, SystemClock


class LogBuffer:
    """Level-filtered, append-only buffer of pending :class:`LogEvent` s.

    :meth:`drain` swaps the pending list for an empty one before the caller
    does any I/O, so events logged while a flush is running land in the next
    flush and no event is ever handed out twice.

    Parameters
    ----------
    min_level:
        Admission threshold; an event is kept iff ``level >= min_level``.
    clock:
        Source of event timestamps (default :class:`SystemClock`).
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        clock: Clock | None = None,
    ) -> None:
        self.min_level = LogLevel.parse(min_level)
        self._clock: Clock = clock or SystemClock()
        self._pending: list[LogEvent] = []
        self._lock = threading.Lock()

    def admits(self, level: LogLevel | int | float) -> bool:
        try:
            return level >= self.min_level
        except TypeError:
            return False

    def append(self, level: LogLevel | int, message: str, extra: Any = None) -> LogEvent | None:
        """Buffer a new event if *level* passes the threshold; return it (or ``None``)."""
        if not self.admits(level):
            return None
        event = LogEvent(
            timestamp=self._clock.now(),
            level=_normalise_level(level),
            message=message,
            extra=extra,
        )
        with self._lock:
            self._pending.append(event)
        return event

    def drain(self) -> list[LogEvent]:
        """Take every pending event, leaving an empty buffer behind."""
        with self._lock:
            taken, self._pending = self._pending, []
        return taken

    def now(self) -> datetime:
        return self._clock.now()

    @property
    def pending(self) -> tuple[LogEvent, ...]:
        """Snapshot of the admitted, not-yet-flushed events in admission order."""
        with self._lock:
            return tuple(self._pending)

    def __len__(self) -> int:
        return len(self._pending)


def _normalise_level(level: LogLevel | int) -> LogLevel | int:
    try:
        return LogLevel(level)
    except ValueError:
        return level


__all__ = ["LogBuffer"]
