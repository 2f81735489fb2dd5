"""Providers – pluggable sinks that buffer log events and flush them on their own schedule."""
from applogger.kernel.rotation import RotationInterval, rotated_file_name, split_file_name
from applogger.providers.buffer import LogBuffer
from applogger.providers.console import ConsoleProvider
from applogger.providers.file import FileProvider
from applogger.providers.protocol import LevelShortcutsMixin, LoggingProvider
from applogger.providers.rendering import render_event, render_events

__all__ = [
    "ConsoleProvider",
    "FileProvider",
    "LevelShortcutsMixin",
    "LogBuffer",
    "LoggingProvider",
    "RotationInterval",
    "render_event",
    "render_events",
    "rotated_file_name",
    "split_file_name",
]
