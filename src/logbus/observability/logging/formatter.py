"""Observability – Formatter."""
from __future__ import annotations

from logbus.kernel.time import Clock, SystemClock


class Formatter:
    """Prefix messages with local date/time and the client id.

    Produces ``[D.M.YYYY H:M:S] <client_id>: <message>`` without zero padding,
    e.g. ``[3.7.2026 9:5:1] crawler-7: disk full``.
    """

    def __init__(self, client_id: str, clock: Clock | None = None) -> None:
        self._client_id = client_id
        self._clock = clock or SystemClock()

    @property
    def client_id(self) -> str:
        return self._client_id

    def format(self, message: str) -> str:
        dt = self._clock.now()
        stamp = f"{dt.day}.{dt.month}.{dt.year} {dt.hour}:{dt.minute}:{dt.second}"
        return f"[{stamp}] {self._client_id}: {message}"


__all__ = ["Formatter"]
