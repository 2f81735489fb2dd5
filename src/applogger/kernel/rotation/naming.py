"""Kernel rotation – file name parsing and rotation naming.

Rotation is a pure function of ``(stem, extension, interval, when)``: no file
handle is kept between flushes, so once the date component changes the next
flush simply targets a new file and older files are left as they are.

Examples::

    >>> from datetime import date
    >>> parts = split_file_name("app.log")
    >>> rotated_file_name(parts, RotationInterval.DAILY, date(2024, 3, 7))
    'app_2024-03-07.log'
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

DEFAULT_EXTENSION = "log"


class RotationInterval(str, Enum):
    """How often a file provider starts a new file."""

    NONE = "none"
    DAILY = "daily"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value: RotationInterval | str) -> RotationInterval:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown rotation interval {value!r}") from None


_DATE_FORMATS: dict[RotationInterval, str] = {
    RotationInterval.DAILY: "{0.year:04d}-{0.month:02d}-{0.day:02d}",
    RotationInterval.MONTHLY: "{0.year:04d}-{0.month:02d}",
    RotationInterval.YEARLY: "{0.year:04d}",
}


@dataclass(frozen=True)
class FileNameParts:
    """A file name split once into stem and extension."""

    stem: str
    extension: str


def split_file_name(file_name: str) -> FileNameParts:
    """Split *file_name* on its last dot.

    A leading dot yields an empty stem (``".env"`` -> ``("", "env")``); no dot
    at all keeps the whole name as stem with the ``log`` extension.
    """
    index = file_name.rfind(".")
    if index < 0:
        return FileNameParts(stem=file_name, extension=DEFAULT_EXTENSION)
    return FileNameParts(stem=file_name[:index], extension=file_name[index + 1:])


def rotated_file_name(
    parts: FileNameParts,
    interval: RotationInterval,
    when: date | datetime,
) -> str:
    """Return the file name a flush at *when* should append to."""
    date_format = _DATE_FORMATS.get(RotationInterval.parse(interval))
    if date_format is None:
        return f"{parts.stem}.{parts.extension}"
    stamp = date_format.format(when)
    if not parts.stem:
        return f"{stamp}.{parts.extension}"
    return f"{parts.stem}_{stamp}.{parts.extension}"


__all__ = [
    "DEFAULT_EXTENSION",
    "FileNameParts",
    "RotationInterval",
    "rotated_file_name",
    "split_file_name",
]
