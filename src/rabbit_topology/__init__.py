"""Declarative RabbitMQ exchange, queue and binding provisioning."""

from .bootstrap import TopologyBootstrapper, TopologyBootstrapperDependencies
from .broker_control import PikaBrokerControl
from .connection import RabbitMQConnection
from .contracts import IBrokerControl, IRabbitMQConnection
from .endpoint import DeadLetterConfig, EndpointConfig, ExchangeConfig, QueueConfig
from .errors import ConfigurationError
from .provisioner import provision

__all__ = [
    "ConfigurationError",
    "DeadLetterConfig",
    "EndpointConfig",
    "ExchangeConfig",
    "IBrokerControl",
    "IRabbitMQConnection",
    "PikaBrokerControl",
    "QueueConfig",
    "RabbitMQConnection",
    "TopologyBootstrapper",
    "TopologyBootstrapperDependencies",
    "provision",
]
