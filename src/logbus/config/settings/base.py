"""Config settings – Settings base class and LogBusSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from logbus.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LogBusSettings(Settings):
    """Everything needed to wire a :class:`~logbus.BusLogger`.

    Read from ``LOGBUS_CLIENT_ID``, ``LOGBUS_SERVICE_ID``,
    ``LOGBUS_LOGS_CHANNEL`` and friends by :class:`EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "LOGBUS"

    client_id: str
    service_id: str
    logs_channel: str
    redis_url: str | None = None
    kafka_bootstrap_servers: str | None = None
    echo: bool = False

    def _validate(self) -> None:
        for name in ("client_id", "service_id", "logs_channel"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise InvalidSettingValueError(name, value, "must not be empty")


__all__ = ["LogBusSettings", "Settings"]
