"""Kernel events – severity levels and the immutable log event record."""
from applogger.kernel.events.event import LogEvent
from applogger.kernel.events.level import LogLevel, level_label

__all__ = ["LogEvent", "LogLevel", "level_label"]
