"""Defines the contract for RabbitMQ connections used during provisioning."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type

from pika.adapters.blocking_connection import BlockingChannel


class IRabbitMQConnection(ABC):
    """A broker connection that hands out one blocking channel at a time.

    Used as a context manager it yields the channel itself and releases the
    connection on exit, whether or not the block raised.
    """

    @abstractmethod
    def connect(self) -> BlockingChannel:
        """Return an open blocking channel, reconnecting if necessary."""

    @abstractmethod
    def close(self) -> None:
        """Close the channel and connection if they are open."""

    def __enter__(self) -> BlockingChannel:
        return self.connect()

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
