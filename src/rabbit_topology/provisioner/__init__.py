"""Brings exchanges, queues and bindings in line with an endpoint configuration."""

from .provisioning_policy import DeclareMode, ProvisioningPolicy, QueueAction
from .topology_provisioner import provision, resolve_queue_arguments

__all__ = [
    "DeclareMode",
    "ProvisioningPolicy",
    "QueueAction",
    "provision",
    "resolve_queue_arguments",
]
