"""Providers – ConsoleProvider."""
from __future__ import annotations

import sys
from datetime import datetime
from typing import Any, TextIO

from applogger.config.settings import ConsoleProviderSettings, EnvSettingsLoader, SettingsLoader
from applogger.kernel.errors import DestinationWriteError
from applogger.kernel.events import LogEvent, LogLevel
from applogger.kernel.time import Clock
from applogger.providers.buffer import LogBuffer
from applogger.providers.protocol import LevelShortcutsMixin
from applogger.providers.rendering import render_events


class ConsoleProvider(LevelShortcutsMixin):
    """Writes flushed events to standard output.

    Parameters
    ----------
    settings:
        :class:`ConsoleProviderSettings`; defaults apply when omitted.
    stream:
        Text stream to write to. When ``None`` the *current* ``sys.stdout``
        is looked up at every flush.
    clock:
        Time source for event timestamps.
    **overrides:
        Field overrides applied on top of *settings*
        (``ConsoleProvider(min_level=LogLevel.WARNING)``).
    """

    name = "console"

    def __init__(
        self,
        settings: ConsoleProviderSettings | None = None,
        *,
        stream: TextIO | None = None,
        clock: Clock | None = None,
        **overrides: Any,
    ) -> None:
        self.settings = (settings or ConsoleProviderSettings()).with_overrides(**overrides)
        self._buffer = LogBuffer(self.settings.min_level, clock)
        self._stream = stream
        self.flush_interval_seconds: float = self.settings.flush_interval_seconds
        self.last_flush_at: datetime = self._buffer.now()

    @classmethod
    def from_env(cls, loader: SettingsLoader | None = None, **kwargs: Any) -> ConsoleProvider:
        """Build from ``APPLOGGER_CONSOLE_*`` environment variables."""
        settings = (loader or EnvSettingsLoader()).load(ConsoleProviderSettings)
        return cls(settings, **kwargs)

    @property
    def min_level(self) -> LogLevel:
        return self._buffer.min_level

    @property
    def pending_events(self) -> tuple[LogEvent, ...]:
        return self._buffer.pending

    def log(self, level: LogLevel | int, message: str, extra: Any = None) -> None:
        self._buffer.append(level, message, extra)

    async def flush(self) -> None:
        events = self._buffer.drain()
        if not events:
            return
        stream = self._stream or sys.stdout
        try:
            stream.write(render_events(events))
            stream.flush()
        except (OSError, ValueError) as exc:
            raise DestinationWriteError(
                "stdout", event_count=len(events), cause=exc
            ) from exc

    def __repr__(self) -> str:
        return (
            f"ConsoleProvider(min_level={self.min_level.name}, "
            f"flush_interval_seconds={self.flush_interval_seconds})"
        )


__all__ = ["ConsoleProvider"]
