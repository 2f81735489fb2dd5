"""Observability – structlog-backed diagnostics for the library itself."""
from applogger.observability.logging.factory import DiagnosticsLoggerFactory
from applogger.observability.logging.processors import LOGGER_NAMESPACE, get_logger

__all__ = ["LOGGER_NAMESPACE", "DiagnosticsLoggerFactory", "get_logger"]
