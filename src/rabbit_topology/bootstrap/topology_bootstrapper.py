"""Runs one provisioning pass against a live broker."""

from __future__ import annotations

import logging
from typing import Optional

from rabbit_topology.contracts import IRabbitMQConnection
from rabbit_topology.endpoint import EndpointConfig
from rabbit_topology.provisioner import provision

from .topology_bootstrapper_config import TopologyBootstrapperDependencies


class TopologyBootstrapper:
    """Provisions an endpoint's topology on a connection it closes afterwards.

    Retrying after a broker error is left to the caller; each ``run`` opens a
    fresh channel, so calling it again after a reconnect is enough.
    """

    def __init__(
        self,
        *,
        connection: IRabbitMQConnection,
        config: EndpointConfig,
        dependencies: Optional[TopologyBootstrapperDependencies] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.connection = connection
        self.config = config
        self.dependencies = dependencies or TopologyBootstrapperDependencies()

    @classmethod
    def from_url(
        cls,
        config: EndpointConfig,
        rabbitmq_url: Optional[str] = None,
        *,
        dependencies: Optional[TopologyBootstrapperDependencies] = None,
    ) -> "TopologyBootstrapper":
        deps = dependencies or TopologyBootstrapperDependencies()

        return cls(
            connection=deps.make_connection(rabbitmq_url),
            config=config,
            dependencies=deps,
        )

    def run(self) -> None:
        exchange = self.config.exchange.name
        queue = self.config.queue.name
        self.logger.info("Provisioning topology for exchange=%s queue=%s", exchange, queue)

        try:
            with self.connection as channel:
                provision(self.config, self.dependencies.make_broker_control(channel))
        except Exception as exc:
            self.logger.error(
                "Provisioning failed for exchange=%s queue=%s: %s", exchange, queue, exc
            )
            raise

        self.logger.info("Provisioned topology for exchange=%s queue=%s", exchange, queue)
