"""Kernel messaging – ports for the key-value store and the log bus."""
from logbus.kernel.messaging.ports import (
    CodeLookup,
    JsonPayloadSerializer,
    LogBus,
    PayloadSerializer,
)

__all__ = ["CodeLookup", "JsonPayloadSerializer", "LogBus", "PayloadSerializer"]
