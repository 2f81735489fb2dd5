"""Kernel events – LogLevel enumeration."""
from __future__ import annotations

from enum import IntEnum


class LogLevel(IntEnum):
    """Closed, totally ordered severity scale.

    Providers admit an event iff ``event.level >= provider.min_level``, so the
    integer values are part of the contract.
    """

    TRACE = 0
    """Probably always ignored."""
    DEBUG = 1
    """Only helpful when troubleshooting."""
    INFO = 2
    """Good to know but not necessary."""
    WARNING = 3
    """Something broke but we think it is ok."""
    ERROR = 4
    """Something is wrong."""
    CRITICAL = 5
    """Cannot go on."""

    @property
    def label(self) -> str:
        """Display name used when rendering (``"Info"``, ``"Warning"``, …)."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: LogLevel | int | str) -> LogLevel:
        """Coerce a member, an int or a case-insensitive name into a ``LogLevel``.

        Raises
        ------
        ValueError
            When *value* does not name or number a level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                raise ValueError(f"Unknown log level {value!r}") from None
        return cls(value)


def level_label(level: int | float) -> str:
    """Return the display label for *level*, or the number itself if unknown."""
    try:
        return LogLevel(level).label
    except ValueError:
        return str(level)


__all__ = ["LogLevel", "level_label"]
