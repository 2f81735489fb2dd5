"""Providers – FileProvider, appending to a date-rotated log file."""
from __future__ import annotations

import asyncio
from datetime import datetime
from pathlib import Path
from typing import Any

from applogger.config.settings import EnvSettingsLoader, FileProviderSettings, SettingsLoader
from applogger.kernel.errors import DestinationWriteError
from applogger.kernel.events import LogEvent, LogLevel
from applogger.kernel.rotation import RotationInterval, rotated_file_name, split_file_name
from applogger.kernel.time import Clock
from applogger.providers.buffer import LogBuffer
from applogger.providers.protocol import LevelShortcutsMixin
from applogger.providers.rendering import render_events


class FileProvider(LevelShortcutsMixin):
    """Appends flushed events to ``<directory_path>/<rotated file name>``.

    The file name is recomputed from the clock on every flush (see
    :func:`~applogger.kernel.rotation.rotated_file_name`), so a daily provider
    starts writing ``app_2024-03-08.log`` on the first flush after midnight
    and never touches ``app_2024-03-07.log`` again. The append itself runs in
    a worker thread.

    Usage::

        provider = FileProvider(
            directory_path="/var/log/myapp",
            file_name="myapp.log",
            rotation_interval=RotationInterval.DAILY,
        )
    """

    name = "file"

    def __init__(
        self,
        settings: FileProviderSettings | None = None,
        *,
        clock: Clock | None = None,
        **overrides: Any,
    ) -> None:
        self.settings = (settings or FileProviderSettings()).with_overrides(**overrides)
        self._buffer = LogBuffer(self.settings.min_level, clock)
        self._parts = split_file_name(self.settings.file_name)
        self.flush_interval_seconds: float = self.settings.flush_interval_seconds
        self.last_flush_at: datetime = self._buffer.now()

    @classmethod
    def from_env(cls, loader: SettingsLoader | None = None, **kwargs: Any) -> FileProvider:
        """Build from ``APPLOGGER_FILE_*`` environment variables."""
        settings = (loader or EnvSettingsLoader()).load(FileProviderSettings)
        return cls(settings, **kwargs)

    @property
    def min_level(self) -> LogLevel:
        return self._buffer.min_level

    @property
    def pending_events(self) -> tuple[LogEvent, ...]:
        return self._buffer.pending

    @property
    def rotation_interval(self) -> RotationInterval:
        return self.settings.rotation_interval

    @property
    def directory_path(self) -> Path:
        return Path(self.settings.directory_path)

    def current_path(self, when: datetime | None = None) -> Path:
        """Path a flush at *when* (default: now) appends to."""
        when = when or self._buffer.now()
        return self.directory_path / rotated_file_name(self._parts, self.rotation_interval, when)

    def log(self, level: LogLevel | int, message: str, extra: Any = None) -> None:
        self._buffer.append(level, message, extra)

    async def flush(self) -> None:
        events = self._buffer.drain()
        if not events:
            return
        path = self.current_path()
        try:
            await asyncio.to_thread(_append_text, path, render_events(events))
        except OSError as exc:
            raise DestinationWriteError(
                str(path), event_count=len(events), cause=exc
            ) from exc

    def __repr__(self) -> str:
        return (
            f"FileProvider(path={str(self.current_path())!r}, min_level={self.min_level.name}, "
            f"rotation_interval={self.rotation_interval.value})"
        )


def _append_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as fh:
        fh.write(text)


__all__ = ["FileProvider"]
