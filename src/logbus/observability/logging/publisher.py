"""Observability – fire-and-forget Publisher.

``send`` schedules delivery on the running event loop and returns at once.
A failed delivery never propagates to the code that logged; it is wrapped in
a :class:`~logbus.kernel.errors.PublishError` and handed to an ``on_error``
hook instead. The default hook writes a structured warning.
"""
from __future__ import annotations

import asyncio
from typing import Callable

from logbus.kernel.errors import PublishError
from logbus.kernel.messaging import LogBus
from logbus.observability.logging.factory import get_logger
from logbus.observability.logging.record import LogRecord

logger = get_logger(__name__)

PublishErrorHook = Callable[[PublishError, LogRecord], None]


def log_publish_error(error: PublishError, record: LogRecord) -> None:
    """Default hook: record the failure in the local log."""
    logger.warning(
        "logbus.publish_failed",
        channel=error.channel,
        partition_key=error.partition_key,
        service=record.service,
        cause=repr(error.cause),
    )


class Publisher:
    """Detach log deliveries from the caller.

    Strong references to in-flight deliveries are kept until they finish so
    the event loop cannot garbage-collect them half way.

    Parameters
    ----------
    on_error:
        Called with the wrapped failure and the record that was lost.
        Defaults to :func:`log_publish_error`.
    """

    def __init__(self, on_error: PublishErrorHook | None = None) -> None:
        self._on_error = on_error or log_publish_error
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of deliveries still in flight."""
        return len(self._tasks)

    def send(self, bus: LogBus, channel: str, record: LogRecord) -> asyncio.Task[None]:
        """Schedule delivery of *record*; must be called from a running loop."""
        task = asyncio.ensure_future(self._deliver(bus, channel, record))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait until every delivery scheduled so far has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _deliver(self, bus: LogBus, channel: str, record: LogRecord) -> None:
        try:
            await bus.send(channel, record.to_payload(), record.partition_key)
        except asyncio.CancelledError:
            raise
        except Exception as exc:  # noqa: BLE001
            self._report(PublishError(channel, record.partition_key, cause=exc), record)
        else:
            logger.debug("logbus.published", channel=channel, partition_key=record.partition_key)

    def _report(self, error: PublishError, record: LogRecord) -> None:
        try:
            self._on_error(error, record)
        except Exception:  # noqa: BLE001
            logger.exception("logbus.publish_error_hook_failed", channel=error.channel)


__all__ = ["PublishErrorHook", "Publisher", "log_publish_error"]
