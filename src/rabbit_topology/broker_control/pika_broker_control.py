"""Issues topology commands over a pika blocking channel."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pika.adapters.blocking_connection import BlockingChannel

from rabbit_topology.contracts import IBrokerControl


class PikaBrokerControl(IBrokerControl):
    """Adapts a ``BlockingChannel`` to ``IBrokerControl``.

    pika errors such as ``ChannelClosedByBroker`` are not caught here. Note that
    a failed passive declare closes the channel, so the caller has to reopen it
    before retrying.
    """

    def __init__(self, channel: BlockingChannel, logger: Optional[logging.Logger] = None) -> None:
        self.channel = channel
        self.logger = logger or logging.getLogger(__name__)

    def declare_exchange(
        self,
        name: str,
        exchange_type: str,
        durable: bool,
        auto_delete: bool,
        arguments: Mapping[str, Any],
    ) -> None:
        self.logger.debug(
            "Declaring exchange %s type=%s durable=%s auto_delete=%s arguments=%s",
            name,
            exchange_type,
            durable,
            auto_delete,
            arguments,
        )
        self.channel.exchange_declare(
            exchange=name,
            exchange_type=exchange_type,
            durable=durable,
            auto_delete=auto_delete,
            arguments=dict(arguments),
        )

    def declare_exchange_passive(self, name: str) -> None:
        self.logger.debug("Checking exchange %s exists", name)
        self.channel.exchange_declare(exchange=name, passive=True)

    def declare_queue(
        self,
        name: str,
        durable: bool,
        exclusive: bool,
        auto_delete: bool,
        arguments: Mapping[str, Any],
    ) -> None:
        self.logger.debug(
            "Declaring queue %s durable=%s exclusive=%s auto_delete=%s arguments=%s",
            name,
            durable,
            exclusive,
            auto_delete,
            arguments,
        )
        self.channel.queue_declare(
            queue=name,
            durable=durable,
            exclusive=exclusive,
            auto_delete=auto_delete,
            arguments=dict(arguments),
        )

    def declare_queue_passive(self, name: str) -> None:
        self.logger.debug("Checking queue %s exists", name)
        self.channel.queue_declare(queue=name, passive=True)

    def bind_queue(
        self,
        queue: str,
        exchange: str,
        routing_key: str,
        arguments: Mapping[str, Any],
    ) -> None:
        self.logger.debug(
            "Binding queue %s to exchange %s with routing_key=%r arguments=%s",
            queue,
            exchange,
            routing_key,
            arguments,
        )
        self.channel.queue_bind(
            queue=queue,
            exchange=exchange,
            routing_key=routing_key,
            arguments=dict(arguments),
        )
