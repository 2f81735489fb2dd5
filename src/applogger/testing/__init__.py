"""Testing support – in-memory doubles for clocks, providers and the scheduler.

Usage::

    from applogger.testing import FakeClock, InMemoryProvider, InMemoryScheduler

    clock = FakeClock()
    provider = InMemoryProvider(clock=clock)
    logger = AppLogger([provider], scheduler=InMemoryScheduler(), clock=clock)
"""

from applogger.application.scheduler import InMemoryScheduler
from applogger.testing.fakes import (
    FailingProvider,
    FakeClock,
    FrozenClock,
    GatedProvider,
    InMemoryProvider,
)

__all__ = [
    "FailingProvider",
    "FakeClock",
    "FrozenClock",
    "GatedProvider",
    "InMemoryProvider",
    "InMemoryScheduler",
]
