"""Application scheduler – Scheduler Protocol and JobExecutionContext."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from applogger.application.scheduler.job import Job
from applogger.observability.logging import get_logger

__all__ = ["JobExecutedEvent", "JobExecutionContext", "Scheduler"]

_log = get_logger(__name__)


@dataclass(frozen=True)
class JobExecutedEvent:
    """Outcome of one job run (successful or not)."""

    job_id: str
    job_name: str
    started_at: datetime
    duration_ms: float
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class JobExecutionContext:
    """Run a job handler once, capturing failures instead of raising them."""

    job: Job
    events: list[JobExecutedEvent] = field(default_factory=list)

    async def run(self) -> JobExecutedEvent:
        started_at = datetime.now(tz=timezone.utc)
        t0 = time.monotonic()
        error: str | None = None
        try:
            await self.job.handler()
        except Exception as exc:  # noqa: BLE001
            error = str(exc) or type(exc).__name__
            _log.error("job.failed", job_id=self.job.id, error=error, exc_info=True)
        duration_ms = (time.monotonic() - t0) * 1000
        event = JobExecutedEvent(
            job_id=self.job.id,
            job_name=self.job.name,
            started_at=started_at,
            duration_ms=duration_ms,
            error=error,
        )
        self.events.append(event)
        return event


@runtime_checkable
class Scheduler(Protocol):
    """Port: run periodic jobs.

    ``start`` is synchronous so an owner can start it from ``__init__``; it
    needs a running event loop. ``stop`` is final for the scheduler's tasks.
    """

    def add_job(self, job: Job) -> None: ...
    def remove_job(self, job_id: str) -> None: ...
    def start(self) -> None: ...
    async def stop(self) -> None: ...
    def list_jobs(self) -> list[Job]: ...

    @property
    def is_running(self) -> bool: ...
