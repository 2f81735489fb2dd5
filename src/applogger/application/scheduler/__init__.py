"""Application scheduler – periodic job ports, APScheduler adapter and in-memory fake."""
from applogger.application.scheduler.apscheduler import APSchedulerAdapter
from applogger.application.scheduler.in_memory import InMemoryScheduler
from applogger.application.scheduler.job import Job
from applogger.application.scheduler.scheduler import (
    JobExecutedEvent,
    JobExecutionContext,
    Scheduler,
)

__all__ = [
    "APSchedulerAdapter",
    "InMemoryScheduler",
    "Job",
    "JobExecutedEvent",
    "JobExecutionContext",
    "Scheduler",
]
