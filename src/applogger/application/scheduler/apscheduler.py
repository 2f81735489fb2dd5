"""Application scheduler – APSchedulerAdapter, the default flush-tick runner."""
from __future__ import annotations

import asyncio
import collections
from datetime import timezone

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from applogger.application.scheduler.job import Job
from applogger.application.scheduler.scheduler import JobExecutedEvent, JobExecutionContext

__all__ = ["APSchedulerAdapter"]


class APSchedulerAdapter:
    """Scheduler backed by APScheduler's :class:`AsyncIOScheduler`.

    Each :class:`Job` becomes an interval schedule on the running event loop.
    A run that is still going when the next one falls due is skipped
    (``max_instances=1``) and missed runs collapse into one (``coalesce``).
    A failing job is recorded in :attr:`execution_log` and keeps its schedule.
    """

    def __init__(self, history: int = 100) -> None:
        self._jobs: dict[str, Job] = {}
        self._scheduler: AsyncIOScheduler | None = None
        self.execution_log: collections.deque[JobExecutedEvent] = collections.deque(maxlen=history)

    def add_job(self, job: Job) -> None:
        self.remove_job(job.id)
        self._jobs[job.id] = job
        if self._scheduler is not None:
            self._register_job(self._scheduler, job)

    def remove_job(self, job_id: str) -> None:
        self._jobs.pop(job_id, None)
        if self._scheduler is not None and self._scheduler.get_job(job_id) is not None:
            self._scheduler.remove_job(job_id)

    def start(self) -> None:
        """Register every job and start ticking on the running event loop.

        Raises
        ------
        RuntimeError
            When called outside a running event loop.
        """
        if self._scheduler is not None:
            return
        loop = asyncio.get_running_loop()
        scheduler = AsyncIOScheduler(event_loop=loop, timezone=timezone.utc)
        for job in self._jobs.values():
            self._register_job(scheduler, job)
        scheduler.start()
        self._scheduler = scheduler

    async def stop(self) -> None:
        scheduler, self._scheduler = self._scheduler, None
        if scheduler is not None and scheduler.running:
            scheduler.shutdown(wait=False)
            # let the executor's cancelled runs unwind before returning
            await asyncio.sleep(0)

    def list_jobs(self) -> list[Job]:
        return list(self._jobs.values())

    @property
    def is_running(self) -> bool:
        return self._scheduler is not None

    def _register_job(self, scheduler: AsyncIOScheduler, job: Job) -> None:
        async def _handler() -> None:
            if not job.enabled:
                return
            self.execution_log.append(await JobExecutionContext(job=job).run())

        scheduler.add_job(
            _handler,
            trigger=IntervalTrigger(seconds=job.interval_seconds, timezone=timezone.utc),
            id=job.id,
            name=job.name,
            max_instances=1,
            coalesce=True,
            misfire_grace_time=None,
        )
