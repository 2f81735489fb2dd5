"""Application – the dispatcher and the scheduler that drives its flush tick."""
from applogger.application.dispatcher import AppLogger, DispatcherState, FlushReport

__all__ = ["AppLogger", "DispatcherState", "FlushReport"]
