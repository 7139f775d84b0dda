"""
logbus – structured log delivery to a message bus for worker processes.

Import path convention::

    from logbus import BusLogger, LogSeverity
    from logbus.adapters.kafka import KafkaLogBus
    from logbus.adapters.redis import RedisCodeLookup
"""

from logbus.observability.logging import BusLogger, LogRecord, LogSeverity

__version__ = "0.1.0"
__all__ = ["BusLogger", "LogRecord", "LogSeverity", "__version__"]
