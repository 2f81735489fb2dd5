"""Kernel rotation – time-derived log file naming."""
from applogger.kernel.rotation.naming import (
    DEFAULT_EXTENSION,
    FileNameParts,
    RotationInterval,
    rotated_file_name,
    split_file_name,
)

__all__ = [
    "DEFAULT_EXTENSION",
    "FileNameParts",
    "RotationInterval",
    "rotated_file_name",
    "split_file_name",
]
