"""Infrastructure errors – destination I/O failures."""

from __future__ import annotations

from typing import Any

from applogger.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    default_code = "infrastructure_error"


class DestinationWriteError(InfrastructureError):
    """A provider could not write flushed events to its destination."""

    default_code = "destination_write_error"

    def __init__(
        self,
        destination: str,
        message: str | None = None,
        *,
        event_count: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not write to '{destination}'", **kwargs)
        self.destination = destination
        self.event_count = event_count


__all__ = ["DestinationWriteError", "InfrastructureError"]
