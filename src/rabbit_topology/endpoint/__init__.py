"""Immutable endpoint configuration consumed by the provisioner."""

from .endpoint_config import DeadLetterConfig, EndpointConfig, ExchangeConfig, QueueConfig

__all__ = [
    "DeadLetterConfig",
    "EndpointConfig",
    "ExchangeConfig",
    "QueueConfig",
]
