"""Testing fakes – in-memory doubles for kernel ports."""
from logbus.testing.fakes.bus import InMemoryLogBus, SentRecord
from logbus.testing.fakes.clock import FakeClock
from logbus.testing.fakes.lookup import InMemoryCodeLookup

__all__ = [
    "FakeClock",
    "InMemoryCodeLookup",
    "InMemoryLogBus",
    "SentRecord",
]
