"""Testing fakes – in-memory doubles for kernel and provider ports."""
from applogger.kernel.time import FrozenClock
from applogger.testing.fakes.clock import FAKE_CLOCK_START, FakeClock
from applogger.testing.fakes.providers import FailingProvider, GatedProvider, InMemoryProvider

__all__ = [
    "FAKE_CLOCK_START",
    "FailingProvider",
    "FakeClock",
    "FrozenClock",
    "GatedProvider",
    "InMemoryProvider",
]
