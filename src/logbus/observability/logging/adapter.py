"""Observability – BusLogger.

Worker processes log through a :class:`BusLogger`: each call formats the
message, resolves a symbolic error code if one was given, builds a
:class:`LogRecord` and hands it to the log bus without waiting::

    bus_logger = BusLogger("crawler-7", "link-crawler", "logs", code_lookup=redis, bus=kafka)
    await bus_logger.log("disk full", "ERR_DISK", LogSeverity.ERROR, {"trace_id": trace_id})

Logging never fails the caller. Without a bus the call only formats the
message; an unresolvable code is dropped from the record; delivery failures
go to ``on_publish_error``.
"""
from __future__ import annotations

from typing import Any, Mapping

from logbus.kernel.errors import CodeLookupError
from logbus.kernel.messaging import CodeLookup, LogBus
from logbus.kernel.time import Clock, SystemClock
from logbus.kernel.types import NOTHING, Option, Some, maybe
from logbus.observability.logging.builder import RecordBuilder
from logbus.observability.logging.codes import CodeResolver
from logbus.observability.logging.factory import get_logger
from logbus.observability.logging.formatter import Formatter
from logbus.observability.logging.publisher import Publisher, PublishErrorHook
from logbus.observability.logging.record import LogSeverity

logger = get_logger(__name__)

_ECHO_METHODS: dict[str, str] = {
    LogSeverity.DEBUG.value: "debug",
    LogSeverity.INFO.value: "info",
    LogSeverity.NOTICE.value: "info",
    LogSeverity.WARNING.value: "warning",
    LogSeverity.ERROR.value: "error",
    LogSeverity.CRITICAL.value: "critical",
}


class BusLogger:
    """Format, enrich and publish log messages for one worker.

    Parameters
    ----------
    client_id:
        Prepended to every message (``"[...] <client_id>: msg"``).
    service_id:
        Written to the ``service`` field of every record.
    channel:
        Bus channel (topic) all records are published to.
    code_lookup:
        Key-value store for symbolic error codes. Optional.
    bus:
        Log bus to publish to. Optional; without it logging is a no-op.
    clock:
        Wall clock for prefixes, record times and synthetic keys.
    on_publish_error:
        Hook for failed deliveries, see :class:`Publisher`.
    echo:
        Also write each formatted message to the local structured log.
    """

    def __init__(
        self,
        client_id: str,
        service_id: str,
        channel: str,
        *,
        code_lookup: CodeLookup | None = None,
        bus: LogBus | None = None,
        clock: Clock | None = None,
        on_publish_error: PublishErrorHook | None = None,
        echo: bool = False,
    ) -> None:
        clock = clock or SystemClock()
        self._service_id = service_id
        self._channel = channel
        self._echo = echo
        self._formatter = Formatter(client_id, clock)
        self._builder = RecordBuilder(clock)
        self._resolver = CodeResolver(maybe(code_lookup))
        self._bus: Option[LogBus] = maybe(bus)
        self._publisher = Publisher(on_publish_error)

    @property
    def client_id(self) -> str:
        return self._formatter.client_id

    @property
    def service_id(self) -> str:
        return self._service_id

    @property
    def channel(self) -> str:
        return self._channel

    @property
    def bus(self) -> Option[LogBus]:
        return self._bus

    @property
    def code_lookup(self) -> Option[CodeLookup]:
        return self._resolver.lookup

    @property
    def pending(self) -> int:
        """Deliveries started by :meth:`log` that have not settled yet."""
        return self._publisher.pending

    def set_bus(self, bus: LogBus | None) -> None:
        """Replace the log bus; ``None`` turns publishing off."""
        self._bus = maybe(bus)

    def set_code_lookup(self, lookup: CodeLookup | None) -> None:
        """Replace the key-value store used for symbolic codes."""
        self._resolver = CodeResolver(maybe(lookup))

    def format(self, message: str) -> str:
        return self._formatter.format(message)

    async def log(
        self,
        message: str,
        code: int | str = 0,
        severity: LogSeverity | str | None = LogSeverity.ERROR,
        extra_data: Mapping[str, Any] | None = None,
    ) -> None:
        """Publish *message* to the log bus.

        Returns once the delivery has been scheduled, not once it has
        completed. A falsy *code* (``0``, ``""``) means "no code".
        """
        msg = self._formatter.format(message)
        if self._echo:
            self._echo_locally(msg, severity)

        bus = self._bus
        if bus.is_none():
            return

        resolved: Option[int] = NOTHING
        if code:
            resolved = await self._resolve(code)

        record = self._builder.build(self._service_id, msg, severity, resolved, extra_data)
        self._publisher.send(bus.unwrap(), self._channel, record)

    async def drain(self) -> None:
        """Wait for every delivery started so far (use on shutdown)."""
        await self._publisher.drain()

    async def _resolve(self, code: int | str) -> Option[int]:
        try:
            return Some(await self._resolver.resolve(code))
        except CodeLookupError as exc:
            logger.warning(
                "logbus.code_lookup_failed",
                symbol=exc.symbol,
                reason=exc.message,
                service=self._service_id,
            )
            return NOTHING

    def _echo_locally(self, msg: str, severity: LogSeverity | str | None) -> None:
        level = severity.value if isinstance(severity, LogSeverity) else str(severity or "")
        method = _ECHO_METHODS.get(level.lower(), "info")
        getattr(logger, method)(msg, service=self._service_id)


__all__ = ["BusLogger"]
