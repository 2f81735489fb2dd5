"""Application – AppLogger, the dispatcher that fans log calls out to providers.

Lifecycle::

    CONSTRUCTED ──start()──▶ RUNNING ──shutdown()──▶ SHUT_DOWN (terminal)

The constructor starts the flush tick straight away when it runs inside an
event loop; otherwise the first ``start()`` (or ``async with``) does.

Each tick asks every provider whether ``last_flush_at + flush_interval_seconds``
has passed and, if so, fires its ``flush()`` as a task without awaiting it.
A provider whose previous flush is still running is skipped for that tick, so
one provider never has two flushes in flight at once.
"""
from __future__ import annotations

import asyncio
import collections
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Iterable

from applogger.application.scheduler import APSchedulerAdapter, Job, Scheduler
from applogger.config.settings import AppLoggerSettings
from applogger.kernel.errors import DispatcherShutDownError
from applogger.kernel.events import LogLevel
from applogger.kernel.time import Clock, SystemClock
from applogger.observability.logging import get_logger
from applogger.providers.protocol import LevelShortcutsMixin, LoggingProvider

__all__ = ["FLUSH_JOB_ID", "AppLogger", "DispatcherState", "FlushReport"]

FLUSH_JOB_ID = "applogger.flush"

_log = get_logger(__name__)


class DispatcherState(str, Enum):
    CONSTRUCTED = "constructed"
    RUNNING = "running"
    SHUT_DOWN = "shut_down"


@dataclass(frozen=True)
class FlushReport:
    """Outcome of one provider flush started by the dispatcher."""

    provider: str
    reason: str
    started_at: datetime
    duration_ms: float
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


class AppLogger(LevelShortcutsMixin):
    """Dispatcher: forwards every log call to every registered provider.

    Parameters
    ----------
    providers:
        Initial providers, in registration order.
    settings:
        :class:`AppLoggerSettings` (tick period); keyword overrides such as
        ``tick_interval_seconds=0.5`` are applied on top.
    scheduler:
        Runs the flush tick. Defaults to :class:`APSchedulerAdapter`; tests pass
        an :class:`~applogger.application.scheduler.InMemoryScheduler`.
    clock:
        Time source for due checks. Every ``last_flush_at`` the dispatcher
        compares against is written from this clock, starting at registration.
    history:
        How many :class:`FlushReport` s to keep in :attr:`flush_reports`.

    Example
    -------
    ::

        async with AppLogger([ConsoleProvider(), FileProvider()]) as logger:
            logger.log_info("user signed in", {"id": 123})
    """

    def __init__(
        self,
        providers: Iterable[LoggingProvider] | None = None,
        settings: AppLoggerSettings | None = None,
        *,
        scheduler: Scheduler | None = None,
        clock: Clock | None = None,
        history: int = 100,
        **overrides: Any,
    ) -> None:
        self.settings = (settings or AppLoggerSettings()).with_overrides(**overrides)
        self._clock: Clock = clock or SystemClock()
        self._providers: list[LoggingProvider] = []
        self._flush_tasks: dict[int, asyncio.Task[FlushReport]] = {}
        self._state = DispatcherState.CONSTRUCTED
        self.flush_reports: collections.deque[FlushReport] = collections.deque(maxlen=history)
        self._scheduler: Scheduler = scheduler or APSchedulerAdapter()
        self._scheduler.add_job(
            Job(
                id=FLUSH_JOB_ID,
                name="flush due providers",
                handler=self.flush_due,
                interval_seconds=self.settings.tick_interval_seconds,
            )
        )
        for provider in providers or ():
            self.add_provider(provider)
        if _loop_is_running():
            self.start()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def state(self) -> DispatcherState:
        return self._state

    @property
    def providers(self) -> tuple[LoggingProvider, ...]:
        return tuple(self._providers)

    def start(self) -> None:
        """Start the flush tick on the running event loop (idempotent)."""
        if self._state is DispatcherState.SHUT_DOWN:
            raise DispatcherShutDownError("start")
        if self._state is DispatcherState.RUNNING:
            return
        self._scheduler.start()
        self._state = DispatcherState.RUNNING
        _log.info(
            "dispatcher.started",
            providers=len(self._providers),
            tick_interval_seconds=self.settings.tick_interval_seconds,
        )

    async def shutdown(self) -> None:
        """Stop the tick for good, then flush every provider one last time."""
        if self._state is DispatcherState.SHUT_DOWN:
            return
        await self._scheduler.stop()
        await self.flush_all_now()
        self._state = DispatcherState.SHUT_DOWN
        _log.info("dispatcher.shut_down", providers=len(self._providers))

    async def __aenter__(self) -> AppLogger:
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.shutdown()

    # ------------------------------------------------------------------
    # Registration and logging
    # ------------------------------------------------------------------

    def add_provider(self, provider: LoggingProvider) -> None:
        """Register *provider* for all subsequent log calls. Providers cannot be removed.

        The provider's ``last_flush_at`` is reset to the dispatcher clock's
        ``now()``, so its first scheduled flush falls one interval after
        registration.
        """
        if self._state is DispatcherState.SHUT_DOWN:
            raise DispatcherShutDownError("add a provider")
        if any(registered is provider for registered in self._providers):
            _log.warning("provider.duplicate", provider=_provider_name(provider))
        else:
            provider.last_flush_at = self._clock.now()
        self._providers.append(provider)

    add_logger = add_provider

    def log(self, level: LogLevel | int, message: str, extra: Any = None) -> None:
        """Forward to every provider's ``log``; never raises."""
        if self._state is DispatcherState.SHUT_DOWN:
            _log.debug("log.after_shutdown", level=level)
            return
        for provider in self._providers:
            try:
                provider.log(level, message, extra)
            except Exception:  # noqa: BLE001
                _log.error("provider.log_failed", provider=_provider_name(provider), exc_info=True)

    # ------------------------------------------------------------------
    # Flushing
    # ------------------------------------------------------------------

    async def flush_due(self) -> None:
        """One scheduler tick: fire ``flush()`` for every provider that is due."""
        now = self._clock.now()
        for provider in self._distinct_providers():
            try:
                due_at = provider.last_flush_at + timedelta(seconds=provider.flush_interval_seconds)
                if now < due_at:
                    continue
            except Exception:  # noqa: BLE001
                _log.error("provider.schedule_invalid", provider=_provider_name(provider), exc_info=True)
                continue
            if self._in_flight(provider) is not None:
                _log.debug("flush.skipped_in_flight", provider=_provider_name(provider))
                continue
            self._launch(provider, "scheduled")
            provider.last_flush_at = now

    async def flush_all_now(self) -> None:
        """Flush every provider regardless of schedule and wait for all of them."""
        now = self._clock.now()
        await asyncio.gather(*(self._force_flush(provider, now) for provider in self._distinct_providers()))

    flush_logs_now = flush_all_now

    async def wait_for_flushes(self) -> None:
        """Wait until no provider has a flush in flight."""
        tasks = [task for task in self._flush_tasks.values() if not task.done()]
        if tasks:
            await asyncio.gather(*tasks)

    async def _force_flush(self, provider: LoggingProvider, now: datetime) -> None:
        while (running := self._in_flight(provider)) is not None:
            await running
        task = self._launch(provider, "forced")
        provider.last_flush_at = now
        await task

    def _distinct_providers(self) -> list[LoggingProvider]:
        # a provider registered twice still gets one flush per tick
        seen: set[int] = set()
        distinct: list[LoggingProvider] = []
        for provider in self._providers:
            if id(provider) not in seen:
                seen.add(id(provider))
                distinct.append(provider)
        return distinct

    def _in_flight(self, provider: LoggingProvider) -> asyncio.Task[FlushReport] | None:
        task = self._flush_tasks.get(id(provider))
        if task is None or task.done():
            return None
        return task

    def _launch(self, provider: LoggingProvider, reason: str) -> asyncio.Task[FlushReport]:
        task = asyncio.get_running_loop().create_task(
            self._run_flush(provider, reason),
            name=f"applogger-flush-{_provider_name(provider)}",
        )
        self._flush_tasks[id(provider)] = task
        return task

    async def _run_flush(self, provider: LoggingProvider, reason: str) -> FlushReport:
        name = _provider_name(provider)
        started_at = self._clock.now()
        t0 = time.monotonic()
        error: str | None = None
        try:
            await provider.flush()
        except Exception as exc:  # noqa: BLE001
            error = str(exc) or type(exc).__name__
            _log.error("flush.failed", provider=name, reason=reason, error=error, exc_info=True)
        report = FlushReport(
            provider=name,
            reason=reason,
            started_at=started_at,
            duration_ms=(time.monotonic() - t0) * 1000,
            error=error,
        )
        self.flush_reports.append(report)
        return report


def _provider_name(provider: object) -> str:
    return str(getattr(provider, "name", None) or type(provider).__name__)


def _loop_is_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True
