"""pika implementation of the broker control capability."""

from .pika_broker_control import PikaBrokerControl

__all__ = ["PikaBrokerControl"]
