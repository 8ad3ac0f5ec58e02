"""Contract interfaces for RabbitMQ topology provisioning."""

from .broker_control_interface import IBrokerControl
from .rabbitmq_connection_interface import IRabbitMQConnection

__all__ = [
    "IBrokerControl",
    "IRabbitMQConnection",
]
