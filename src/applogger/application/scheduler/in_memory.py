"""Application scheduler – InMemoryScheduler for unit tests."""
from __future__ import annotations

from applogger.application.scheduler.job import Job
from applogger.application.scheduler.scheduler import JobExecutedEvent, JobExecutionContext

__all__ = ["InMemoryScheduler"]


class InMemoryScheduler:
    """Scheduler that never ticks on its own; ``trigger`` fires a job manually.

    ``trigger`` refuses to run while the scheduler is stopped, mirroring a real
    scheduler whose timer has been cancelled.
    """

    def __init__(self) -> None:
        self._jobs: dict[str, Job] = {}
        self._running: bool = False
        self.start_calls: int = 0
        self.execution_log: list[JobExecutedEvent] = []

    def add_job(self, job: Job) -> None:
        self._jobs[job.id] = job

    def remove_job(self, job_id: str) -> None:
        self._jobs.pop(job_id, None)

    def start(self) -> None:
        self.start_calls += 1
        self._running = True

    async def stop(self) -> None:
        self._running = False

    def list_jobs(self) -> list[Job]:
        return list(self._jobs.values())

    async def trigger(self, job_id: str) -> JobExecutedEvent | None:
        """Fire *job_id* once; returns ``None`` when the scheduler is not running."""
        if not self._running:
            return None
        job = self._jobs[job_id]
        event = await JobExecutionContext(job=job).run()
        self.execution_log.append(event)
        return event

    @property
    def is_running(self) -> bool:
        return self._running
