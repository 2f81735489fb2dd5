"""Kernel events – LogEvent."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from applogger.kernel.events.level import LogLevel, level_label


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """One admitted log call, owned by a single provider's buffer until flushed.

    ``extra`` is opaque to the library and passed through untouched.
    """

    timestamp: datetime
    level: LogLevel | int
    message: str
    extra: Any = None

    @property
    def level_label(self) -> str:
        return level_label(self.level)

    @property
    def has_extra(self) -> bool:
        return self.extra is not None


__all__ = ["LogEvent"]
