"""Observability – structured log records and their delivery to a log bus."""

from logbus.observability.logging import (
    BusLogger,
    JsonLoggerFactory,
    LogRecord,
    LogSeverity,
    get_logger,
)

__all__ = ["BusLogger", "JsonLoggerFactory", "LogRecord", "LogSeverity", "get_logger"]
