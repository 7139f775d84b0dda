"""Kafka adapter – KafkaLogBus."""
from __future__ import annotations

import asyncio
from typing import Any, Mapping

from logbus.kernel.messaging import JsonPayloadSerializer, LogBus, PayloadSerializer
from logbus.observability.logging import get_logger

logger = get_logger(__name__)


def _require_aiokafka() -> Any:
    try:
        import aiokafka  # type: ignore[import-untyped]
        return aiokafka
    except ImportError as exc:
        raise ImportError("Install 'logbus[kafka]' to use the Kafka adapter") from exc


class KafkaLogBus(LogBus):
    """aiokafka-backed producer implementing ``LogBus``.

    Channels map to topics and partition keys to message keys. The producer
    is started lazily by the first :meth:`send`; concurrent first sends share
    a single start. :meth:`send` returns once the broker has acknowledged the
    record, so delivery errors surface to the caller.
    """

    def __init__(
        self,
        bootstrap_servers: str,
        serializer: PayloadSerializer | None = None,
        **producer_kwargs: Any,
    ) -> None:
        aiokafka = _require_aiokafka()
        self._producer = aiokafka.AIOKafkaProducer(bootstrap_servers=bootstrap_servers, **producer_kwargs)
        self._serializer = serializer or JsonPayloadSerializer()
        self._started = False
        self._start_lock = asyncio.Lock()

    async def start(self) -> None:
        await self._producer.start()
        self._started = True

    async def stop(self) -> None:
        await self._producer.stop()
        self._started = False

    async def __aenter__(self) -> "KafkaLogBus":
        await self.start()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.stop()

    async def send(self, channel: str, payload: Mapping[str, Any], partition_key: str) -> None:
        if not self._started:
            await self._ensure_started()
        await self._producer.send_and_wait(
            topic=channel,
            value=self._serializer.serialize(payload),
            key=str(partition_key).encode(),
        )
        logger.debug("kafka.published", topic=channel, key=partition_key)

    async def _ensure_started(self) -> None:
        async with self._start_lock:
            if not self._started:
                await self.start()


__all__ = ["KafkaLogBus"]
