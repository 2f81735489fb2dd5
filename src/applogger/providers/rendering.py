"""Providers – text rendering shared by the console and file providers.

One line per event, ``"<timestamp> [<Level>]: <message>"``, followed by a JSON
line for ``extra`` when the event carries one.
"""
from __future__ import annotations

import json
from collections.abc import Iterable

from applogger.kernel.events import LogEvent


def render_event(event: LogEvent) -> str:
    text = f"{event.timestamp.isoformat()} [{event.level_label}]: {event.message}\n"
    if event.has_extra:
        text += json.dumps(event.extra, default=str, ensure_ascii=False) + "\n"
    return text


def render_events(events: Iterable[LogEvent]) -> str:
    return "".join(render_event(event) for event in events)


__all__ = ["render_event", "render_events"]
