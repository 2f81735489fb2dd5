"""Config settings – dispatcher and provider settings."""
from __future__ import annotations

import dataclasses
import math
import os
from typing import ClassVar

from applogger.config.settings.base import Settings
from applogger.config.validation import InvalidSettingValueError
from applogger.kernel.events import LogLevel
from applogger.kernel.rotation import RotationInterval

DEFAULT_FILE_NAME = "applogger.log"


@dataclasses.dataclass
class AppLoggerSettings(Settings):
    """Dispatcher settings: how often the flush tick runs."""

    _prefix: ClassVar[str] = "APPLOGGER"

    tick_interval_seconds: float = 1.0

    def _validate(self) -> None:
        if not _is_number(self.tick_interval_seconds) or self.tick_interval_seconds <= 0:
            raise InvalidSettingValueError(
                "tick_interval_seconds", self.tick_interval_seconds, "must be a positive number", prefix=self._prefix
            )


@dataclasses.dataclass
class ProviderSettings(Settings):
    """Options every provider recognises.

    ``min_level`` accepts a :class:`LogLevel`, its integer value or its name
    (``"warning"``); it is normalised to a :class:`LogLevel` on construction.
    """

    _prefix: ClassVar[str] = "APPLOGGER_PROVIDER"

    min_level: LogLevel = LogLevel.INFO
    flush_interval_seconds: float = 1.0

    def _validate(self) -> None:
        try:
            self.min_level = LogLevel.parse(self.min_level)
        except (ValueError, TypeError) as exc:
            raise InvalidSettingValueError("min_level", self.min_level, str(exc), prefix=self._prefix) from exc
        if not _is_number(self.flush_interval_seconds) or self.flush_interval_seconds < 0:
            raise InvalidSettingValueError(
                "flush_interval_seconds", self.flush_interval_seconds, "must be a non-negative number", prefix=self._prefix
            )


@dataclasses.dataclass
class ConsoleProviderSettings(ProviderSettings):
    _prefix: ClassVar[str] = "APPLOGGER_CONSOLE"


@dataclasses.dataclass
class FileProviderSettings(ProviderSettings):
    """File provider options.

    ``directory_path`` and ``file_name`` are not checked here: a bad path only
    surfaces as a :class:`~applogger.kernel.errors.DestinationWriteError` when a
    flush tries to write.
    """

    _prefix: ClassVar[str] = "APPLOGGER_FILE"

    directory_path: str | os.PathLike[str] = dataclasses.field(default_factory=os.getcwd)
    file_name: str = DEFAULT_FILE_NAME
    rotation_interval: RotationInterval = RotationInterval.NONE

    def _validate(self) -> None:
        super()._validate()
        try:
            self.rotation_interval = RotationInterval.parse(self.rotation_interval)
        except ValueError as exc:
            raise InvalidSettingValueError(
                "rotation_interval", self.rotation_interval, str(exc), prefix=self._prefix
            ) from exc


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


__all__ = [
    "DEFAULT_FILE_NAME",
    "AppLoggerSettings",
    "ConsoleProviderSettings",
    "FileProviderSettings",
    "ProviderSettings",
]
