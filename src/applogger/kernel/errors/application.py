"""Application-layer errors – misuse of the dispatcher lifecycle."""

from __future__ import annotations

from typing import Any

from applogger.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class DispatcherShutDownError(ApplicationError):
    """The dispatcher was shut down and cannot be restarted or extended."""

    default_code = "dispatcher_shut_down"

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Cannot {operation}: the logger has been shut down", **kwargs)
        self.operation = operation


__all__ = ["ApplicationError", "DispatcherShutDownError"]
