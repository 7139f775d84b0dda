"""Observability – LogSeverity and LogRecord."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Mapping

from logbus.kernel.types import NOTHING, Option


class LogSeverity(str, Enum):
    """Severities understood by the log collector."""

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclasses.dataclass(frozen=True)
class LogRecord:
    """A single log entry on its way to the bus.

    ``partition_key`` routes the record on the bus and is never part of the
    payload returned by :meth:`to_payload`.
    """

    service: str
    time: int
    msg: str
    partition_key: str
    severity: Option[str] = NOTHING
    code: Option[int] = NOTHING
    extra_data: Option[Mapping[str, Any]] = NOTHING

    def to_payload(self) -> dict[str, Any]:
        """Wire shape: ``{service, time, msg, severity?, code?, extra_data?}``."""
        payload: dict[str, Any] = {
            "service": self.service,
            "time": self.time,
            "msg": self.msg,
        }
        for severity in self.severity:
            payload["severity"] = severity
        for code in self.code:
            payload["code"] = code
        for extra in self.extra_data:
            payload["extra_data"] = dict(extra)
        return payload


__all__ = ["LogRecord", "LogSeverity"]
