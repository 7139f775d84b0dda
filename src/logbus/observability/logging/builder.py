"""Observability – RecordBuilder.

Assembles a :class:`LogRecord` and derives the key it is published under.
Records carrying a ``trace_id`` in their extra data are keyed by its string
form, so all records of one trace land on the same partition; anything else
gets a throw-away ``<epoch_millis>_<random digits>`` key.
"""
from __future__ import annotations

import random
from typing import Any, Mapping

from logbus.kernel.time import Clock, SystemClock
from logbus.kernel.types import NOTHING, Option, Some
from logbus.observability.logging.record import LogRecord, LogSeverity

TRACE_ID_KEY = "trace_id"


class RecordBuilder:
    """Build log records for a single service.

    Parameters
    ----------
    clock:
        Source of ``time`` and of the millisecond part of synthetic keys.
    rng:
        Random source for synthetic keys. Defaults to a private
        :class:`random.Random`.
    """

    def __init__(self, clock: Clock | None = None, rng: random.Random | None = None) -> None:
        self._clock = clock or SystemClock()
        self._rng = rng or random.Random()

    def build(
        self,
        service: str,
        msg: str,
        severity: LogSeverity | str | None,
        code: Option[int],
        extra_data: Mapping[str, Any] | None,
    ) -> LogRecord:
        """Assemble a record from an already formatted message.

        *code* is the resolver's output; the caller passes ``NOTHING`` when no
        code was given or it could not be resolved.
        """
        return LogRecord(
            service=service,
            time=round(self._clock.timestamp()),
            msg=msg,
            partition_key=self.correlation_key(extra_data),
            severity=_severity(severity),
            code=code,
            extra_data=Some(dict(extra_data)) if extra_data else NOTHING,
        )

    def correlation_key(self, extra_data: Mapping[str, Any] | None) -> str:
        if extra_data and extra_data.get(TRACE_ID_KEY):
            return str(extra_data[TRACE_ID_KEY])
        millis = int(self._clock.timestamp() * 1000)
        # 53 bits: the mantissa of a random float in [0, 1)
        return f"{millis}_{self._rng.getrandbits(53)}"


def _severity(severity: LogSeverity | str | None) -> Option[str]:
    if not severity:
        return NOTHING
    if isinstance(severity, LogSeverity):
        return Some(severity.value)
    return Some(str(severity))


__all__ = ["TRACE_ID_KEY", "RecordBuilder"]
