"""Shared fixtures for provisioning scenario tests."""

from typing import Any, List, Mapping, Tuple

import pytest

from rabbit_topology.contracts import IBrokerControl


class RecordingBrokerControl(IBrokerControl):
    """Keeps every broker command in order and tracks what exists on the broker."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []
        self.exchanges: dict = {}
        self.queues: dict = {}
        self.bindings: set = set()

    def declare_exchange(
        self,
        name: str,
        exchange_type: str,
        durable: bool,
        auto_delete: bool,
        arguments: Mapping[str, Any],
    ) -> None:
        self.calls.append(("declare_exchange", name, exchange_type))
        self.exchanges.setdefault(name, exchange_type)

    def declare_exchange_passive(self, name: str) -> None:
        self.calls.append(("declare_exchange_passive", name))
        if name not in self.exchanges:
            raise LookupError(f"no exchange '{name}'")

    def declare_queue(
        self,
        name: str,
        durable: bool,
        exclusive: bool,
        auto_delete: bool,
        arguments: Mapping[str, Any],
    ) -> None:
        self.calls.append(("declare_queue", name, dict(arguments)))
        self.queues.setdefault(name, dict(arguments))

    def declare_queue_passive(self, name: str) -> None:
        self.calls.append(("declare_queue_passive", name))
        if name not in self.queues:
            raise LookupError(f"no queue '{name}'")

    def bind_queue(
        self,
        queue: str,
        exchange: str,
        routing_key: str,
        arguments: Mapping[str, Any],
    ) -> None:
        self.calls.append(("bind_queue", queue, exchange, routing_key))
        self.bindings.add((queue, exchange, routing_key))

    def call_names(self) -> List[str]:
        return [entry[0] for entry in self.calls]


@pytest.fixture
def broker():
    return RecordingBrokerControl()
