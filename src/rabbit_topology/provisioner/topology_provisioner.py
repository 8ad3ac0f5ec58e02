"""Declares and binds the broker topology an endpoint configuration asks for.

Calls are issued strictly in order: dead-letter exchange, dead-letter queue
and its binding, then the primary exchange, queue and binding. The first
broker error stops the run and reaches the caller unchanged; entities declared
before it stay on the broker.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from rabbit_topology.arguments import (
    DEAD_LETTER_EXCHANGE_KEY,
    DEAD_LETTER_ROUTING_KEY_KEY,
    normalize_queue_arguments,
)
from rabbit_topology.contracts import IBrokerControl
from rabbit_topology.endpoint import EndpointConfig

from .provisioning_policy import DeclareMode, ProvisioningPolicy, QueueAction


def provision(config: EndpointConfig, broker_control: IBrokerControl) -> None:
    """Bring exchanges, queues and bindings in line with ``config``.

    Safe to repeat with the same configuration, e.g. on every reconnect.

    Raises:
        ConfigurationError: if a queue argument cannot be coerced; raised
            before any call touching that queue.
        Exception: whatever ``broker_control`` raises, unchanged.
    """
    policy = ProvisioningPolicy.from_config(config)
    _provision_dead_letter(config, policy, broker_control)
    _provision_primary(config, policy, broker_control)


def resolve_queue_arguments(config: EndpointConfig) -> Dict[str, Any]:
    """Arguments the primary queue is declared with.

    Dead-letter entries are seeded first so configured queue arguments can
    override them.
    """
    arguments: Dict[str, Any] = {}
    dead_letter = config.dead_letter
    if dead_letter.enabled:
        arguments[DEAD_LETTER_EXCHANGE_KEY] = dead_letter.exchange
        if dead_letter.routing_key is not None:
            arguments[DEAD_LETTER_ROUTING_KEY_KEY] = dead_letter.routing_key
    arguments.update(config.queue.arguments)
    return normalize_queue_arguments(arguments)


def _provision_dead_letter(
    config: EndpointConfig, policy: ProvisioningPolicy, broker_control: IBrokerControl
) -> None:
    if not policy.declare_dead_letter_exchange:
        return

    dead_letter = config.dead_letter
    queue_arguments = normalize_queue_arguments(dead_letter.arguments)

    assert dead_letter.exchange is not None
    _declare_exchange(
        broker_control,
        policy.mode,
        config,
        name=dead_letter.exchange,
        exchange_type=dead_letter.exchange_type,
        arguments={},
    )

    if policy.dead_letter_queue is not QueueAction.NONE:
        assert dead_letter.queue is not None
        _declare_and_bind_queue(
            broker_control,
            policy.mode,
            config,
            name=dead_letter.queue,
            exchange=dead_letter.exchange,
            routing_key=dead_letter.routing_key,
            arguments=queue_arguments,
            binding_arguments=dead_letter.binding_arguments,
            bind=policy.dead_letter_queue is QueueAction.DECLARE_AND_BIND,
        )


def _provision_primary(
    config: EndpointConfig, policy: ProvisioningPolicy, broker_control: IBrokerControl
) -> None:
    exchange = config.exchange
    queue = config.queue

    if policy.declare_exchange:
        _declare_exchange(
            broker_control,
            policy.mode,
            config,
            name=exchange.name,
            exchange_type=exchange.exchange_type,
            arguments=dict(exchange.arguments),
        )

    if policy.queue in (QueueAction.DECLARE, QueueAction.DECLARE_AND_BIND):
        assert queue.name is not None
        _declare_and_bind_queue(
            broker_control,
            policy.mode,
            config,
            name=queue.name,
            exchange=exchange.name,
            routing_key=queue.routing_key,
            arguments=resolve_queue_arguments(config),
            binding_arguments=queue.binding_arguments,
            bind=policy.queue is QueueAction.DECLARE_AND_BIND,
        )
    elif policy.queue is QueueAction.VERIFY_AND_BIND:
        assert queue.name is not None
        broker_control.declare_exchange_passive(exchange.name)
        broker_control.declare_queue_passive(queue.name)
        broker_control.bind_queue(
            queue.name, exchange.name, queue.routing_key or "", dict(queue.binding_arguments)
        )


def _declare_exchange(
    broker_control: IBrokerControl,
    mode: DeclareMode,
    config: EndpointConfig,
    *,
    name: str,
    exchange_type: str,
    arguments: Dict[str, Any],
) -> None:
    if mode is DeclareMode.PASSIVE:
        broker_control.declare_exchange_passive(name)
        return
    broker_control.declare_exchange(
        name,
        exchange_type,
        config.exchange.durable,
        config.exchange.auto_delete,
        arguments,
    )


def _declare_and_bind_queue(
    broker_control: IBrokerControl,
    mode: DeclareMode,
    config: EndpointConfig,
    *,
    name: str,
    exchange: str,
    routing_key: Optional[str],
    arguments: Dict[str, Any],
    binding_arguments: Mapping[str, Any],
    bind: bool,
) -> None:
    if mode is DeclareMode.PASSIVE:
        broker_control.declare_queue_passive(name)
    else:
        broker_control.declare_queue(
            name,
            config.queue.durable,
            config.queue.exclusive,
            config.queue.auto_delete,
            arguments,
        )
    if bind:
        broker_control.bind_queue(name, exchange, routing_key or "", dict(binding_arguments))
