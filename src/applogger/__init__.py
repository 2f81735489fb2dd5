"""
applogger – buffered, provider-based logging facade.

Import path convention::

    from applogger import AppLogger, LogLevel
    from applogger.providers import ConsoleProvider, FileProvider, RotationInterval

Typical usage::

    async def main() -> None:
        async with AppLogger([ConsoleProvider(min_level=LogLevel.DEBUG)]) as logger:
            logger.log_info("started", {"pid": 42})
"""

from applogger.application.dispatcher import AppLogger, DispatcherState
from applogger.kernel.events import LogEvent, LogLevel
from applogger.providers import (
    ConsoleProvider,
    FileProvider,
    LoggingProvider,
    RotationInterval,
)

__version__ = "0.1.0"
__all__ = [
    "AppLogger",
    "ConsoleProvider",
    "DispatcherState",
    "FileProvider",
    "LogEvent",
    "LogLevel",
    "LoggingProvider",
    "RotationInterval",
    "__version__",
]
