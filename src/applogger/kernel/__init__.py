"""Kernel – framework-agnostic building blocks (events, errors, time)."""

from applogger.kernel.errors import (
    ApplicationError,
    BaseError,
    DestinationWriteError,
    DispatcherShutDownError,
    InfrastructureError,
)
from applogger.kernel.events import LogEvent, LogLevel

__all__ = [
    "ApplicationError",
    "BaseError",
    "DestinationWriteError",
    "DispatcherShutDownError",
    "InfrastructureError",
    "LogEvent",
    "LogLevel",
]
