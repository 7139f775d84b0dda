"""Observability – log record pipeline: format, resolve, build, publish."""
from logbus.observability.logging.factory import JsonLoggerFactory, get_logger
from logbus.observability.logging.record import LogRecord, LogSeverity
from logbus.observability.logging.formatter import Formatter
from logbus.observability.logging.codes import CodeResolver
from logbus.observability.logging.builder import TRACE_ID_KEY, RecordBuilder
from logbus.observability.logging.publisher import Publisher, PublishErrorHook, log_publish_error
from logbus.observability.logging.adapter import BusLogger

__all__ = [
    "BusLogger",
    "CodeResolver",
    "Formatter",
    "JsonLoggerFactory",
    "LogRecord",
    "LogSeverity",
    "PublishErrorHook",
    "Publisher",
    "RecordBuilder",
    "TRACE_ID_KEY",
    "get_logger",
    "log_publish_error",
]
