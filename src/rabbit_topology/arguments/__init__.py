"""Well-known RabbitMQ argument keys and queue argument normalization."""

from .queue_arguments import (
    DEAD_LETTER_EXCHANGE_KEY,
    DEAD_LETTER_ROUTING_KEY_KEY,
    QUEUE_LENGTH_LIMIT_KEY,
    QUEUE_MAX_PRIORITY_KEY,
    QUEUE_MESSAGE_TTL_KEY,
    QUEUE_SINGLE_ACTIVE_CONSUMER_KEY,
    QUEUE_TTL_KEY,
    normalize_queue_arguments,
)

__all__ = [
    "DEAD_LETTER_EXCHANGE_KEY",
    "DEAD_LETTER_ROUTING_KEY_KEY",
    "QUEUE_LENGTH_LIMIT_KEY",
    "QUEUE_MAX_PRIORITY_KEY",
    "QUEUE_MESSAGE_TTL_KEY",
    "QUEUE_SINGLE_ACTIVE_CONSUMER_KEY",
    "QUEUE_TTL_KEY",
    "normalize_queue_arguments",
]
