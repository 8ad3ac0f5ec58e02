"""Configuration primitives for wiring a `TopologyBootstrapper`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from pika.adapters.blocking_connection import BlockingChannel

from rabbit_topology.broker_control import PikaBrokerControl
from rabbit_topology.connection import RabbitMQConnection
from rabbit_topology.contracts import IBrokerControl, IRabbitMQConnection


@dataclass(frozen=True)
class TopologyBootstrapperDependencies:
    """Bundles the factories a bootstrapper uses to reach the broker."""

    make_connection: Callable[[Optional[str]], IRabbitMQConnection] = field(
        default=lambda rabbitmq_url: RabbitMQConnection(rabbitmq_url)
    )
    make_broker_control: Callable[[BlockingChannel], IBrokerControl] = field(
        default=PikaBrokerControl
    )
