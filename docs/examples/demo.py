"""Console + daily-rotating file logging in a dozen lines.

Run with::

    pip install -e .
    python docs/examples/demo.py

Writes to stdout and to ``docs/examples/applogger_<YYYY-MM-DD>.log``.
"""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from applogger import AppLogger, ConsoleProvider, FileProvider, LogLevel, RotationInterval
from applogger.observability import DiagnosticsLoggerFactory


async def main() -> None:
    DiagnosticsLoggerFactory.configure(logging.INFO)

    logger = AppLogger(
        [
            ConsoleProvider(min_level=LogLevel.TRACE),
            FileProvider(
                directory_path=Path(__file__).parent,
                min_level=LogLevel.TRACE,
                rotation_interval=RotationInterval.DAILY,
            ),
        ]
    )

    logger.log_trace("Trace message, you will rarely want to see me")
    logger.log_debug("Debug message, handy when chasing a seemingly random bug")
    logger.log_info(
        "Information, usually part of verbose logging",
        {"id": 123, "name": "some user", "action": "did some thing"},
    )

    await logger.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
