"""Kafka adapter – log bus backed by an aiokafka producer."""
from logbus.adapters.kafka.producer import KafkaLogBus

__all__ = ["KafkaLogBus"]
