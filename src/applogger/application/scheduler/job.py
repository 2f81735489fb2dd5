"""Application scheduler – Job dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Awaitable, Callable

__all__ = ["Job"]


@dataclass
class Job:
    """A coroutine function run every ``interval_seconds``."""

    id: str
    name: str
    handler: Callable[[], Awaitable[None]]
    interval_seconds: float
    enabled: bool = True

    def __post_init__(self) -> None:
        if (
            isinstance(self.interval_seconds, bool)
            or not isinstance(self.interval_seconds, (int, float))
            or not math.isfinite(self.interval_seconds)
            or self.interval_seconds <= 0
        ):
            raise ValueError("Job 'interval_seconds' must be a positive number")
