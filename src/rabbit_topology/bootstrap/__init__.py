"""Wires a connection, a broker control and the provisioner together."""

from .topology_bootstrapper import TopologyBootstrapper
from .topology_bootstrapper_config import TopologyBootstrapperDependencies

__all__ = [
    "TopologyBootstrapper",
    "TopologyBootstrapperDependencies",
]
