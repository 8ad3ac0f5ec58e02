"""RabbitMQ connection management."""

from __future__ import annotations

import logging
import os
from typing import Optional

import pika
from pika.adapters.blocking_connection import BlockingChannel, BlockingConnection
from pika.connection import URLParameters

from rabbit_topology.contracts import IRabbitMQConnection

RABBITMQ_URL_ENV = "RABBITMQ_URL"


class RabbitMQConnection(IRabbitMQConnection):
    """Owns a blocking RabbitMQ connection and the single channel used on it.

    ``heartbeat`` and ``blocked_connection_timeout`` override whatever the URL
    query string says when given.
    """

    def __init__(
        self,
        rabbitmq_url: Optional[str] = None,
        *,
        heartbeat: Optional[int] = None,
        blocked_connection_timeout: Optional[float] = None,
    ) -> None:
        url = (rabbitmq_url or os.getenv(RABBITMQ_URL_ENV) or "").strip()
        if not url:
            raise ValueError(
                f"RabbitMQ URL must be provided via argument or {RABBITMQ_URL_ENV} environment variable."
            )

        try:
            parameters = pika.URLParameters(url)
        except ValueError as exc:
            raise ValueError(f"Invalid RabbitMQ URL provided: {url}") from exc

        if heartbeat is not None:
            parameters.heartbeat = heartbeat
        if blocked_connection_timeout is not None:
            parameters.blocked_connection_timeout = blocked_connection_timeout

        self._parameters: URLParameters = parameters
        self.rabbitmq_url = url
        self.connection: Optional[BlockingConnection] = None
        self.channel: Optional[BlockingChannel] = None
        self.logger = logging.getLogger(__name__)

    def connect(self) -> BlockingChannel:
        if self.connection is None or self.connection.is_closed:
            self.logger.info(
                "Connecting to RabbitMQ at %s:%s", self._parameters.host, self._parameters.port
            )
            try:
                self.connection = pika.BlockingConnection(self._parameters)
            except pika.exceptions.AMQPConnectionError as exc:
                self.logger.error("Failed to establish RabbitMQ connection: %s", exc)
                raise
            self.channel = None

        if self.channel is None or self.channel.is_closed:
            # A passive declare on a missing entity closes the channel, so reopen on demand.
            self.logger.debug("Opening channel on RabbitMQ connection.")
            self.channel = self.connection.channel()

        return self.channel

    def close(self) -> None:
        if self.channel is not None and self.channel.is_open:
            self.channel.close()
            self.logger.debug("Closed RabbitMQ channel.")

        if self.connection is not None and self.connection.is_open:
            self.connection.close()
            self.logger.info("Closed RabbitMQ connection.")
