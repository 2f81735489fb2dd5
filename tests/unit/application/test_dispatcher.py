"""Unit tests for AppLogger, the dispatcher."""
from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import Any

import pytest

from applogger import AppLogger, DispatcherState, LogLevel
from applogger.application.dispatcher import FLUSH_JOB_ID
from applogger.config.settings import AppLoggerSettings
from applogger.kernel.errors import DispatcherShutDownError
from applogger.kernel.time import FrozenClock
from applogger.testing import (
    FailingProvider,
    FakeClock,
    GatedProvider,
    InMemoryProvider,
    InMemoryScheduler,
)


def _logger(*providers: Any, clock: FrozenClock | None = None) -> tuple[AppLogger, InMemoryScheduler]:
    scheduler = InMemoryScheduler()
    return AppLogger(providers, scheduler=scheduler, clock=clock or FakeClock()), scheduler


class _ExplodingLogProvider(InMemoryProvider):
    def log(self, level, message, extra=None):
        raise RuntimeError("cannot buffer")


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------
class TestLifecycle:
    def test_constructed_outside_loop_waits_for_start(self):
        logger, scheduler = _logger()
        assert logger.state is DispatcherState.CONSTRUCTED
        assert scheduler.is_running is False
        assert [job.id for job in scheduler.list_jobs()] == [FLUSH_JOB_ID]

    def test_constructor_starts_tick_inside_running_loop(self):
        async def _run():
            logger, scheduler = _logger()
            assert logger.state is DispatcherState.RUNNING
            assert scheduler.is_running is True
            await logger.shutdown()
        asyncio.run(_run())

    def test_start_is_idempotent(self):
        async def _run():
            logger, scheduler = _logger()
            logger.start()
            logger.start()
            assert scheduler.start_calls == 1
            await logger.shutdown()
        asyncio.run(_run())

    def test_tick_interval_comes_from_settings(self):
        logger, scheduler = _logger()
        assert scheduler.list_jobs()[0].interval_seconds == 1.0
        custom = AppLogger(
            scheduler=InMemoryScheduler(), settings=AppLoggerSettings(tick_interval_seconds=0.25)
        )
        assert custom.settings.tick_interval_seconds == 0.25

    def test_shutdown_is_terminal(self):
        async def _run():
            logger, scheduler = _logger(InMemoryProvider())
            await logger.shutdown()
            assert logger.state is DispatcherState.SHUT_DOWN
            assert scheduler.is_running is False
            with pytest.raises(DispatcherShutDownError):
                logger.start()
            with pytest.raises(DispatcherShutDownError):
                logger.add_provider(InMemoryProvider())
            await logger.shutdown()
        asyncio.run(_run())

    def test_no_tick_after_shutdown(self):
        async def _run():
            clock = FakeClock()
            provider = InMemoryProvider(flush_interval_seconds=0, clock=clock)
            logger, scheduler = _logger(provider, clock=clock)
            logger.start()
            await logger.shutdown()
            calls = provider.flush_calls
            assert await scheduler.trigger(FLUSH_JOB_ID) is None
            assert provider.flush_calls == calls
        asyncio.run(_run())

    def test_shutdown_flushes_everything_buffered(self):
        async def _run():
            fast = InMemoryProvider(flush_interval_seconds=1)
            slow = InMemoryProvider(flush_interval_seconds=3600, name="slow")
            logger, _ = _logger(fast, slow)
            logger.log_error("pending")
            await logger.shutdown()
            assert fast.messages == ["pending"]
            assert slow.messages == ["pending"]
        asyncio.run(_run())

    def test_log_after_shutdown_is_dropped(self):
        async def _run():
            provider = InMemoryProvider()
            logger, _ = _logger(provider)
            await logger.shutdown()
            logger.log_critical("too late")
            assert provider.pending_events == ()
        asyncio.run(_run())

    def test_async_context_manager(self):
        async def _run():
            provider = InMemoryProvider()
            async with AppLogger([provider], scheduler=InMemoryScheduler()) as logger:
                assert logger.state is DispatcherState.RUNNING
                logger.log_info("inside")
            assert logger.state is DispatcherState.SHUT_DOWN
            assert provider.messages == ["inside"]
        asyncio.run(_run())


# ---------------------------------------------------------------------------
# Fan-out and admission
# ---------------------------------------------------------------------------
class TestLogging:
    def test_warning_threshold_scenario(self):
        async def _run():
            provider = InMemoryProvider(min_level=LogLevel.WARNING)
            logger, _ = _logger(provider)
            logger.log_info("x")
            logger.log_error("y")
            await logger.flush_all_now()
            assert provider.messages == ["y"]
            assert "[Error]: y" in provider.output
        asyncio.run(_run())

    def test_each_provider_decides_independently(self):
        strict = InMemoryProvider(min_level=LogLevel.WARNING, flush_interval_seconds=5, name="strict")
        chatty = InMemoryProvider(min_level=LogLevel.TRACE, flush_interval_seconds=1, name="chatty")
        logger, _ = _logger(strict, chatty)
        logger.log(LogLevel.INFO, "hello", {"k": "v"})
        assert strict.pending_events == ()
        assert [e.message for e in chatty.pending_events] == ["hello"]
        assert chatty.pending_events[0].extra == {"k": "v"}

    def test_shorthands_forward_fixed_levels(self):
        provider = InMemoryProvider(min_level=LogLevel.TRACE)
        logger, _ = _logger(provider)
        logger.log_trace("t")
        logger.log_debug("d")
        logger.log_info("i")
        logger.log_warning("w")
        logger.log_error("e")
        logger.log_critical("c")
        assert [e.level for e in provider.pending_events] == list(LogLevel)

    def test_added_provider_only_sees_later_calls(self):
        first = InMemoryProvider(name="first")
        logger, _ = _logger(first)
        logger.log_info("a")
        second = InMemoryProvider(name="second")
        logger.add_provider(second)
        logger.log_info("b")
        assert [e.message for e in first.pending_events] == ["a", "b"]
        assert [e.message for e in second.pending_events] == ["b"]
        assert logger.providers == (first, second)

    def test_add_logger_alias(self):
        logger, _ = _logger()
        provider = InMemoryProvider()
        logger.add_logger(provider)
        assert logger.providers == (provider,)

    def test_duplicate_registration_warns(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.WARNING, logger="applogger")
        provider = InMemoryProvider()
        logger, _ = _logger(provider)
        logger.add_provider(provider)
        assert "provider.duplicate" in caplog.text
        assert len(logger.providers) == 2

    def test_failing_provider_log_does_not_break_fan_out(self):
        healthy = InMemoryProvider(name="healthy")
        logger, _ = _logger(_ExplodingLogProvider(), healthy)
        logger.log_error("still delivered")
        assert [e.message for e in healthy.pending_events] == ["still delivered"]

    def test_no_providers_is_fine(self):
        logger, _ = _logger()
        logger.log_critical("nobody listens")


# ---------------------------------------------------------------------------
# Scheduled flushing
# ---------------------------------------------------------------------------
class TestScheduledFlush:
    def test_only_due_providers_flush(self):
        async def _run():
            clock = FakeClock()
            fast = InMemoryProvider(flush_interval_seconds=1, clock=clock, name="fast")
            slow = InMemoryProvider(flush_interval_seconds=5, clock=clock, name="slow")
            logger, scheduler = _logger(fast, slow, clock=clock)
            logger.start()
            logger.log_error("e1")

            clock.tick(1)
            await scheduler.trigger(FLUSH_JOB_ID)
            await logger.wait_for_flushes()
            assert fast.messages == ["e1"]
            assert slow.messages == []
            assert fast.last_flush_at == clock.now()

            clock.tick(4)
            await scheduler.trigger(FLUSH_JOB_ID)
            await logger.wait_for_flushes()
            assert slow.messages == ["e1"]
            await logger.shutdown()
        asyncio.run(_run())

    def test_not_due_before_interval(self):
        async def _run():
            clock = FakeClock()
            provider = InMemoryProvider(flush_interval_seconds=2, clock=clock)
            logger, scheduler = _logger(provider, clock=clock)
            logger.start()
            logger.log_info("waiting")
            clock.advance(seconds=1, microseconds=999_999)
            await scheduler.trigger(FLUSH_JOB_ID)
            await logger.wait_for_flushes()
            assert provider.flush_calls == 0
            clock.advance(microseconds=1)
            await scheduler.trigger(FLUSH_JOB_ID)
            await logger.wait_for_flushes()
            assert provider.messages == ["waiting"]
            await logger.shutdown()
        asyncio.run(_run())

    def test_one_failure_does_not_block_others(self):
        async def _run():
            clock = FakeClock()
            broken = FailingProvider(flush_interval_seconds=0, clock=clock)
            healthy = InMemoryProvider(flush_interval_seconds=0, clock=clock, name="healthy")
            logger, scheduler = _logger(broken, healthy, clock=clock)
            logger.start()
            logger.log_error("one")
            await scheduler.trigger(FLUSH_JOB_ID)
            await logger.wait_for_flushes()
            logger.log_error("two")
            await scheduler.trigger(FLUSH_JOB_ID)
            await logger.wait_for_flushes()

            assert healthy.messages == ["one", "two"]
            assert [e.message for e in broken.dropped] == ["one", "two"]
            assert broken.pending_events == ()
            failures = [r for r in logger.flush_reports if not r.success]
            assert [r.provider for r in failures] == ["failing", "failing"]
            assert failures[0].error == "destination unavailable"
            assert failures[0].reason == "scheduled"
            await logger.shutdown()
        asyncio.run(_run())

    def test_flush_failure_is_logged(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.ERROR, logger="applogger")

        async def _run():
            logger, _ = _logger(FailingProvider())
            logger.log_error("lost")
            await logger.flush_all_now()

        asyncio.run(_run())
        assert "flush.failed" in caplog.text

    def test_in_flight_flush_is_not_overlapped(self):
        async def _run():
            clock = FakeClock()
            gated = GatedProvider(flush_interval_seconds=0, clock=clock)
            logger, scheduler = _logger(gated, clock=clock)
            logger.start()
            logger.log_error("first")
            await scheduler.trigger(FLUSH_JOB_ID)
            await gated.entered.wait()

            clock.tick(1)
            logger.log_error("second")
            await scheduler.trigger(FLUSH_JOB_ID)
            assert gated.flush_calls == 1
            assert [e.message for e in gated.pending_events] == ["second"]

            gated.gate.set()
            await logger.wait_for_flushes()
            await scheduler.trigger(FLUSH_JOB_ID)
            await logger.wait_for_flushes()

            assert gated.messages == ["first", "second"]
            assert gated.max_active == 1
            await logger.shutdown()
        asyncio.run(_run())

    def test_real_scheduler_ticks(self):
        async def _run():
            provider = InMemoryProvider(flush_interval_seconds=0)
            logger = AppLogger([provider], tick_interval_seconds=0.02)
            assert logger.state is DispatcherState.RUNNING
            logger.log_warning("ticked")
            await asyncio.sleep(0.3)
            assert provider.messages == ["ticked"]
            await logger.shutdown()
        asyncio.run(_run())


# ---------------------------------------------------------------------------
# Forced flushing
# ---------------------------------------------------------------------------
class TestFlushAllNow:
    def test_ignores_schedule(self):
        async def _run():
            clock = FakeClock()
            provider = InMemoryProvider(flush_interval_seconds=3600, clock=clock)
            logger, _ = _logger(provider, clock=clock)
            logger.log_info("now please")
            clock.tick(3)
            await logger.flush_all_now()
            assert provider.messages == ["now please"]
            assert provider.last_flush_at == clock.now()
            assert logger.flush_reports[-1].reason == "forced"
        asyncio.run(_run())

    def test_flush_logs_now_alias(self):
        async def _run():
            provider = InMemoryProvider()
            logger, _ = _logger(provider)
            logger.log_info("alias")
            await logger.flush_logs_now()
            assert provider.messages == ["alias"]
        asyncio.run(_run())

    def test_second_flush_produces_no_duplicates(self):
        async def _run():
            provider = InMemoryProvider()
            logger, _ = _logger(provider)
            logger.log_info("once")
            await logger.flush_all_now()
            await logger.flush_all_now()
            assert provider.messages == ["once"]
            assert len(provider.batches) == 1
        asyncio.run(_run())

    def test_waits_for_in_flight_flush(self):
        async def _run():
            clock = FakeClock()
            gated = GatedProvider(flush_interval_seconds=0, clock=clock)
            logger, scheduler = _logger(gated, clock=clock)
            logger.start()
            logger.log_error("scheduled")
            await scheduler.trigger(FLUSH_JOB_ID)
            await gated.entered.wait()
            logger.log_error("forced")

            forced = asyncio.create_task(logger.flush_all_now())
            await asyncio.sleep(0)
            await asyncio.sleep(0)
            assert gated.flush_calls == 1

            gated.gate.set()
            await forced
            assert gated.messages == ["scheduled", "forced"]
            assert gated.max_active == 1
            await logger.shutdown()
        asyncio.run(_run())

    def test_duplicate_registration_flushes_once_at_a_time(self):
        async def _run():
            gated = GatedProvider()
            logger, _ = _logger(gated)
            logger.add_provider(gated)
            logger.log_error("x")

            forced = asyncio.create_task(logger.flush_all_now())
            await gated.entered.wait()
            await asyncio.sleep(0)
            assert gated.active == 1

            gated.gate.set()
            await forced
            assert gated.max_active == 1
            assert gated.flush_calls == 1
            assert gated.messages == ["x", "x"]
        asyncio.run(_run())


# ---------------------------------------------------------------------------
# Time base
# ---------------------------------------------------------------------------
class TestTimeBase:
    def test_registration_rebases_last_flush_at_on_dispatcher_clock(self):
        async def _run():
            provider_clock = FakeClock(datetime(2000, 1, 1, tzinfo=UTC))
            clock = FakeClock()
            provider = InMemoryProvider(flush_interval_seconds=5, clock=provider_clock)
            logger, scheduler = _logger(provider, clock=clock)
            assert provider.last_flush_at == clock.now()
            logger.start()
            logger.log_error("held")

            clock.tick(4)
            await scheduler.trigger(FLUSH_JOB_ID)
            await logger.wait_for_flushes()
            assert provider.flush_calls == 0

            clock.tick(1)
            await scheduler.trigger(FLUSH_JOB_ID)
            await logger.wait_for_flushes()
            assert provider.messages == ["held"]
            await logger.shutdown()
        asyncio.run(_run())

    def test_provider_ahead_of_dispatcher_still_becomes_due(self):
        async def _run():
            provider = InMemoryProvider(flush_interval_seconds=1, clock=FakeClock(datetime(2099, 1, 1, tzinfo=UTC)))
            clock = FakeClock()
            logger, scheduler = _logger(provider, clock=clock)
            logger.start()
            logger.log_error("not stuck")
            clock.tick(1)
            await scheduler.trigger(FLUSH_JOB_ID)
            await logger.wait_for_flushes()
            assert provider.messages == ["not stuck"]
            await logger.shutdown()
        asyncio.run(_run())

    def test_duplicate_registration_keeps_schedule(self):
        clock = FakeClock()
        provider = InMemoryProvider(clock=clock)
        logger, _ = _logger(provider, clock=clock)
        clock.tick(3)
        logger.add_provider(provider)
        assert provider.last_flush_at == FakeClock().now()
