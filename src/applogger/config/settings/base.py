"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, TypeVar

T = TypeVar("T", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Base class for env-loadable settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to coerce and cross-check fields."""

    def with_overrides(self: T, **overrides: Any) -> T:
        """Return a copy with *overrides* applied (re-validated)."""
        if not overrides:
            return self
        return dataclasses.replace(self, **overrides)


__all__ = ["Settings"]
