"""Wire a BusLogger from :class:`~logbus.config.LogBusSettings`."""
from __future__ import annotations

from logbus.config import LogBusSettings
from logbus.observability.logging import BusLogger, PublishErrorHook


def build_bus_logger(
    settings: LogBusSettings,
    *,
    on_publish_error: PublishErrorHook | None = None,
) -> BusLogger:
    """Create a :class:`BusLogger` with Redis/Kafka collaborators when configured.

    Collaborators whose connection setting is empty are left out; the logger
    then degrades as documented on :class:`BusLogger`.
    """
    code_lookup = None
    if settings.redis_url:
        from logbus.adapters.redis import RedisCodeLookup

        code_lookup = RedisCodeLookup(settings.redis_url)

    bus = None
    if settings.kafka_bootstrap_servers:
        from logbus.adapters.kafka import KafkaLogBus

        bus = KafkaLogBus(settings.kafka_bootstrap_servers)

    return BusLogger(
        settings.client_id,
        settings.service_id,
        settings.logs_channel,
        code_lookup=code_lookup,
        bus=bus,
        on_publish_error=on_publish_error,
        echo=settings.echo,
    )


__all__ = ["build_bus_logger"]
