"""Infrastructure errors: failures of the key-value store or the log bus."""

from __future__ import annotations

from typing import Any

from logbus.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    default_code = "infrastructure_error"


class CodeLookupError(InfrastructureError):
    """A symbolic error code could not be turned into a number.

    Covers an absent lookup client, a store error, a missing key and a value
    that does not parse as an integer.
    """

    default_code = "code_lookup_failed"

    def __init__(
        self,
        symbol: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not resolve error code '{symbol}'", **kwargs)
        self.symbol = symbol
        self.detail.setdefault("symbol", symbol)


class PublishError(InfrastructureError):
    """The log bus rejected or failed to deliver a record."""

    default_code = "publish_failed"

    def __init__(
        self,
        channel: str,
        partition_key: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Failed to publish log record to '{channel}'", **kwargs)
        self.channel = channel
        self.partition_key = partition_key
        self.detail.setdefault("channel", channel)
        self.detail.setdefault("partition_key", partition_key)


__all__ = ["CodeLookupError", "InfrastructureError", "PublishError"]
