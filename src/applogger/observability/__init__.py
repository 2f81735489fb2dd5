"""Observability – the library's own diagnostics."""
from applogger.observability.logging import DiagnosticsLoggerFactory, get_logger

__all__ = ["DiagnosticsLoggerFactory", "get_logger"]
