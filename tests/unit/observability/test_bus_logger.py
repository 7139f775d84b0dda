"""Unit tests for BusLogger – the end-to-end log pipeline."""
from __future__ import annotations

import asyncio
import re
from typing import Any

import pytest
from structlog.testing import capture_logs

from logbus import BusLogger, LogSeverity
from logbus.kernel.errors import PublishError
from logbus.kernel.types import NOTHING, Some
from logbus.observability.logging import LogRecord
from logbus.testing.fakes import FakeClock, InMemoryCodeLookup, InMemoryLogBus, SentRecord

_SYNTHETIC_KEY = re.compile(r"^\d+_\d+$")


def _logger(**kwargs: Any) -> BusLogger:
    kwargs.setdefault("clock", FakeClock())
    return BusLogger("crawler-7", "link-crawler", "logs", **kwargs)


def _log_and_drain(bus_logger: BusLogger, *args: Any, **kwargs: Any) -> None:
    async def run() -> None:
        await bus_logger.log(*args, **kwargs)
        await bus_logger.drain()
    asyncio.run(run())


def _only(bus: InMemoryLogBus) -> SentRecord:
    [sent] = bus.sent
    return sent


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------


class TestPipeline:
    def test_disk_full_scenario(self) -> None:
        clock = FakeClock()
        bus = InMemoryLogBus()
        lookup = InMemoryCodeLookup({"ERR_DISK": "500"})
        bus_logger = BusLogger("crawler-7", "link-crawler", "logs", code_lookup=lookup, bus=bus, clock=clock)

        _log_and_drain(bus_logger, "disk full", "ERR_DISK", "error", {"trace_id": "t-1"})

        sent = _only(bus)
        assert sent.channel == "logs"
        assert sent.partition_key == "t-1"
        assert sent.payload == {
            "service": "link-crawler",
            "time": round(clock.timestamp()),
            "msg": "[3.7.2026 9:5:1] crawler-7: disk full",
            "severity": "error",
            "code": 500,
            "extra_data": {"trace_id": "t-1"},
        }

    def test_defaults(self) -> None:
        bus = InMemoryLogBus()
        _log_and_drain(_logger(bus=bus), "hello")
        payload = _only(bus).payload
        assert payload["severity"] == "error"
        assert "code" not in payload
        assert "extra_data" not in payload
        assert payload["msg"].endswith("crawler-7: hello")

    def test_numeric_code_skips_lookup(self) -> None:
        bus = InMemoryLogBus()
        lookup = InMemoryCodeLookup()
        _log_and_drain(_logger(bus=bus, code_lookup=lookup), "m", 404)
        assert _only(bus).payload["code"] == 404
        assert lookup.requested == []

    @pytest.mark.parametrize("code", [0, ""])
    def test_falsy_code_omitted_without_lookup(self, code: int | str) -> None:
        bus = InMemoryLogBus()
        lookup = InMemoryCodeLookup({"": "1"})
        _log_and_drain(_logger(bus=bus, code_lookup=lookup), "m", code)
        assert "code" not in _only(bus).payload
        assert lookup.requested == []

    @pytest.mark.parametrize("severity", ["", None])
    def test_empty_severity_omitted(self, severity: str | None) -> None:
        bus = InMemoryLogBus()
        _log_and_drain(_logger(bus=bus), "m", 0, severity)
        assert "severity" not in _only(bus).payload

    def test_severity_enum(self) -> None:
        bus = InMemoryLogBus()
        _log_and_drain(_logger(bus=bus), "m", 0, LogSeverity.NOTICE)
        assert _only(bus).payload["severity"] == "notice"

    def test_synthetic_keys_without_trace(self) -> None:
        bus = InMemoryLogBus()
        bus_logger = _logger(bus=bus)

        async def run() -> None:
            await bus_logger.log("a", extra_data={})
            await bus_logger.log("b")
            await bus_logger.drain()

        asyncio.run(run())
        first, second = bus.sent
        assert _SYNTHETIC_KEY.match(first.partition_key)
        assert _SYNTHETIC_KEY.match(second.partition_key)
        assert first.partition_key != second.partition_key

    def test_log_returns_before_delivery(self) -> None:
        bus = InMemoryLogBus()
        bus_logger = _logger(bus=bus)

        async def run() -> tuple[int, int]:
            await bus_logger.log("m")
            before = len(bus.sent)
            pending = bus_logger.pending
            await bus_logger.drain()
            return before, pending

        before, pending = asyncio.run(run())
        assert before == 0
        assert pending == 1
        assert len(bus.sent) == 1


# ---------------------------------------------------------------------------
# Degradation
# ---------------------------------------------------------------------------


class TestDegradation:
    def test_no_bus_means_no_send(self) -> None:
        lookup = InMemoryCodeLookup({"ERR_X": "1"})
        bus_logger = _logger(code_lookup=lookup)
        _log_and_drain(bus_logger, "m", "ERR_X", "error", {"trace_id": "t"})
        assert lookup.requested == []
        assert bus_logger.pending == 0

    def test_lookup_failure_omits_code(self) -> None:
        bus = InMemoryLogBus()
        lookup = InMemoryCodeLookup(fail_with=ConnectionError("redis down"))
        with capture_logs() as logs:
            _log_and_drain(_logger(bus=bus, code_lookup=lookup), "m", "ERR_X")
        assert "code" not in _only(bus).payload
        [warning] = [e for e in logs if e["event"] == "logbus.code_lookup_failed"]
        assert warning["symbol"] == "ERR_X"
        assert warning["log_level"] == "warning"

    def test_missing_key_omits_code(self) -> None:
        bus = InMemoryLogBus()
        _log_and_drain(_logger(bus=bus, code_lookup=InMemoryCodeLookup()), "m", "ERR_X")
        assert "code" not in _only(bus).payload

    def test_non_numeric_value_omits_code(self) -> None:
        bus = InMemoryLogBus()
        lookup = InMemoryCodeLookup({"ERR_X": "n/a"})
        _log_and_drain(_logger(bus=bus, code_lookup=lookup), "m", "ERR_X")
        assert "code" not in _only(bus).payload

    def test_no_lookup_omits_code(self) -> None:
        bus = InMemoryLogBus()
        _log_and_drain(_logger(bus=bus), "m", "ERR_X")
        assert "code" not in _only(bus).payload

    def test_publish_failure_does_not_raise(self) -> None:
        seen: list[PublishError] = []
        bus = InMemoryLogBus(fail_with=ConnectionError("broker down"))
        bus_logger = _logger(bus=bus, on_publish_error=lambda err, rec: seen.append(err))
        _log_and_drain(bus_logger, "m")
        assert bus.calls == 1
        assert len(seen) == 1
        assert isinstance(seen[0].cause, ConnectionError)


# ---------------------------------------------------------------------------
# Collaborator swaps
# ---------------------------------------------------------------------------


class TestSetters:
    def test_set_bus_takes_effect_on_next_call(self) -> None:
        first, second = InMemoryLogBus(), InMemoryLogBus()
        bus_logger = _logger(bus=first)

        async def run() -> None:
            await bus_logger.log("one")
            bus_logger.set_bus(second)
            await bus_logger.log("two")
            await bus_logger.drain()

        asyncio.run(run())
        assert _only(first).payload["msg"].endswith("one")
        assert _only(second).payload["msg"].endswith("two")

    def test_clearing_bus_stops_sends(self) -> None:
        bus = InMemoryLogBus()
        bus_logger = _logger(bus=bus)
        bus_logger.set_bus(None)
        _log_and_drain(bus_logger, "m")
        assert bus.calls == 0
        assert bus_logger.bus is NOTHING

    def test_set_code_lookup(self) -> None:
        bus = InMemoryLogBus()
        bus_logger = _logger(bus=bus)
        lookup = InMemoryCodeLookup({"ERR_X": "7"})
        bus_logger.set_code_lookup(lookup)
        assert bus_logger.code_lookup == Some(lookup)
        _log_and_drain(bus_logger, "m", "ERR_X")
        assert _only(bus).payload["code"] == 7


# ---------------------------------------------------------------------------
# Accessors, format and echo
# ---------------------------------------------------------------------------


class TestBusLoggerMisc:
    def test_identifiers(self) -> None:
        bus_logger = _logger()
        assert bus_logger.client_id == "crawler-7"
        assert bus_logger.service_id == "link-crawler"
        assert bus_logger.channel == "logs"
        assert bus_logger.bus is NOTHING
        assert bus_logger.code_lookup is NOTHING

    def test_format(self) -> None:
        assert _logger().format("x") == "[3.7.2026 9:5:1] crawler-7: x"

    def test_echo_writes_local_log(self) -> None:
        with capture_logs() as logs:
            _log_and_drain(_logger(echo=True), "disk full", 0, LogSeverity.WARNING)
        [entry] = logs
        assert entry["event"] == "[3.7.2026 9:5:1] crawler-7: disk full"
        assert entry["log_level"] == "warning"
        assert entry["service"] == "link-crawler"

    def test_echo_unknown_severity_uses_info(self) -> None:
        with capture_logs() as logs:
            _log_and_drain(_logger(echo=True), "m", 0, "fatal")
        assert logs[0]["log_level"] == "info"

    def test_echo_off_by_default(self) -> None:
        with capture_logs() as logs:
            _log_and_drain(_logger(), "m")
        assert logs == []

    def test_record_type_is_exported(self) -> None:
        assert LogRecord.__name__ == "LogRecord"
