"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError         (application.py)
    │   └── DispatcherShutDownError
    └── InfrastructureError      (infrastructure.py)
        └── DestinationWriteError

Configuration errors (``ConfigError`` and friends) derive from
``ApplicationError`` and live in :mod:`applogger.config.validation`.
"""

from applogger.kernel.errors.application import ApplicationError, DispatcherShutDownError
from applogger.kernel.errors.base import BaseError
from applogger.kernel.errors.infrastructure import DestinationWriteError, InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DestinationWriteError",
    "DispatcherShutDownError",
    "InfrastructureError",
]
