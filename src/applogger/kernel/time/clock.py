"""Kernel time – Clock protocol + implementations.

Every timestamp the library produces (event times, flush due checks and the
date used for file rotation) is read from a :class:`Clock`, so tests can pin
time with :class:`FrozenClock`.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Test clock pinned to a fixed point in time; naive datetimes are taken as UTC."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = _as_utc(fixed)

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)

    def set(self, fixed: datetime) -> None:
        self._fixed = _as_utc(fixed)


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
