"""Kernel messaging – collaborator ports.

A :class:`~logbus.BusLogger` talks to the outside world through two ports:

* :class:`CodeLookup` – resolves symbolic error codes (e.g. Redis ``GET``).
* :class:`LogBus` – publishes a payload to a channel with a partition key
  (e.g. a Kafka topic).
"""
from __future__ import annotations

import abc
import json
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class CodeLookup(Protocol):
    """Port: read-only key-value store used to resolve symbolic codes."""

    async def get(self, key: str) -> str | bytes | None: ...


class LogBus(abc.ABC):
    """Port: publish log payloads to a named channel."""

    @abc.abstractmethod
    async def send(self, channel: str, payload: Mapping[str, Any], partition_key: str) -> None: ...


class PayloadSerializer(abc.ABC):
    """Port: turn a log payload into bytes for the wire."""

    @abc.abstractmethod
    def serialize(self, payload: Mapping[str, Any]) -> bytes: ...


class JsonPayloadSerializer(PayloadSerializer):
    """UTF-8 JSON encoding; unknown values fall back to ``str()``."""

    def serialize(self, payload: Mapping[str, Any]) -> bytes:
        return json.dumps(dict(payload), default=str, ensure_ascii=False).encode()


__all__ = ["CodeLookup", "JsonPayloadSerializer", "LogBus", "PayloadSerializer"]
