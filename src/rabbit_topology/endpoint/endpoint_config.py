"""Declarative description of the exchanges, queues and bindings an endpoint needs."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from rabbit_topology.errors import ConfigurationError

DEFAULT_EXCHANGE_TYPE = "direct"

EXCHANGE_ARG_PREFIX = "exchange."
QUEUE_ARG_PREFIX = "queue."
BINDING_ARG_PREFIX = "binding."
DLQ_ARG_PREFIX = "dlq."
DLQ_BINDING_ARG_PREFIX = "dlq.binding."


def _frozen(arguments: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(arguments or {}))


@dataclass(frozen=True)
class ExchangeConfig:
    """The primary exchange messages are published to."""

    name: str
    exchange_type: str = DEFAULT_EXCHANGE_TYPE
    durable: bool = True
    auto_delete: bool = True
    arguments: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", _frozen(self.arguments))


@dataclass(frozen=True)
class QueueConfig:
    """The primary queue and how it is bound to the exchange.

    Leave ``name`` unset when the endpoint only publishes and no queue should
    be declared or bound. An unset ``routing_key`` binds with ``""``.
    """

    name: Optional[str] = None
    routing_key: Optional[str] = None
    durable: bool = True
    exclusive: bool = False
    auto_delete: bool = True
    arguments: Mapping[str, Any] = field(default_factory=dict)
    binding_arguments: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", _frozen(self.arguments))
        object.__setattr__(self, "binding_arguments", _frozen(self.binding_arguments))

    @property
    def is_named(self) -> bool:
        return bool(self.name)


@dataclass(frozen=True)
class DeadLetterConfig:
    """Where rejected or expired messages of the primary queue are routed."""

    exchange: Optional[str] = None
    exchange_type: str = DEFAULT_EXCHANGE_TYPE
    queue: Optional[str] = None
    routing_key: Optional[str] = None
    arguments: Mapping[str, Any] = field(default_factory=dict)
    binding_arguments: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", _frozen(self.arguments))
        object.__setattr__(self, "binding_arguments", _frozen(self.binding_arguments))

    @property
    def enabled(self) -> bool:
        return bool(self.exchange)


@dataclass(frozen=True)
class EndpointConfig:
    """Everything needed to bring broker topology in line with one endpoint.

    ``passive`` turns every declaration into an existence check. The ``skip_*``
    switches drop individual steps; see ``rabbit_topology.provisioner`` for how
    they combine.
    """

    exchange: ExchangeConfig
    queue: QueueConfig = field(default_factory=QueueConfig)
    dead_letter: DeadLetterConfig = field(default_factory=DeadLetterConfig)
    passive: bool = False
    skip_exchange_declare: bool = False
    skip_queue_declare: bool = False
    skip_queue_bind: bool = False
    skip_dead_letter_declare: bool = False

    @classmethod
    def from_properties(cls, exchange_name: str, properties: Mapping[str, Any]) -> "EndpointConfig":
        """Build a configuration from flat endpoint options.

        Option names follow the usual RabbitMQ endpoint URI options
        (``queue``, ``routingKey``, ``skipQueueBind``, ``deadLetterExchange``
        and so on). ``args`` holds broker arguments whose prefix decides where
        they go: ``exchange.``, ``queue.``, ``binding.``, ``dlq.binding.`` or
        ``dlq.``.

        Raises:
            ConfigurationError: on an unknown option, a malformed boolean or
                an argument without a recognised prefix.
        """
        unknown = set(properties) - _KNOWN_OPTIONS
        if unknown:
            raise ConfigurationError(f"Unknown endpoint options: {', '.join(sorted(unknown))}")

        args = _split_args(properties.get("args") or {})
        durable = _option_bool(properties, "durable", True)
        auto_delete = _option_bool(properties, "autoDelete", True)

        return cls(
            exchange=ExchangeConfig(
                name=exchange_name,
                exchange_type=properties.get("exchangeType", DEFAULT_EXCHANGE_TYPE),
                durable=durable,
                auto_delete=auto_delete,
                arguments=args[EXCHANGE_ARG_PREFIX],
            ),
            queue=QueueConfig(
                name=properties.get("queue"),
                routing_key=properties.get("routingKey"),
                durable=durable,
                exclusive=_option_bool(properties, "exclusive", False),
                auto_delete=auto_delete,
                arguments=args[QUEUE_ARG_PREFIX],
                binding_arguments=args[BINDING_ARG_PREFIX],
            ),
            dead_letter=DeadLetterConfig(
                exchange=properties.get("deadLetterExchange"),
                exchange_type=properties.get("deadLetterExchangeType", DEFAULT_EXCHANGE_TYPE),
                queue=properties.get("deadLetterQueue"),
                routing_key=properties.get("deadLetterRoutingKey"),
                arguments=args[DLQ_ARG_PREFIX],
                binding_arguments=args[DLQ_BINDING_ARG_PREFIX],
            ),
            passive=_option_bool(properties, "passive", False),
            skip_exchange_declare=_option_bool(properties, "skipExchangeDeclare", False),
            skip_queue_declare=_option_bool(properties, "skipQueueDeclare", False),
            skip_queue_bind=_option_bool(properties, "skipQueueBind", False),
            skip_dead_letter_declare=_option_bool(properties, "skipDlqDeclare", False),
        )


_KNOWN_OPTIONS = frozenset(
    {
        "exchangeType",
        "queue",
        "routingKey",
        "durable",
        "autoDelete",
        "exclusive",
        "passive",
        "skipExchangeDeclare",
        "skipQueueDeclare",
        "skipQueueBind",
        "skipDlqDeclare",
        "deadLetterExchange",
        "deadLetterExchangeType",
        "deadLetterQueue",
        "deadLetterRoutingKey",
        "args",
    }
)

# Longest prefix first: "dlq.binding." must win over "dlq.".
_ARG_PREFIXES = (
    DLQ_BINDING_ARG_PREFIX,
    DLQ_ARG_PREFIX,
    EXCHANGE_ARG_PREFIX,
    QUEUE_ARG_PREFIX,
    BINDING_ARG_PREFIX,
)


def _split_args(args: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    grouped: Dict[str, Dict[str, Any]] = {prefix: {} for prefix in _ARG_PREFIXES}
    for key, value in args.items():
        for prefix in _ARG_PREFIXES:
            if key.startswith(prefix):
                grouped[prefix][key[len(prefix):]] = value
                break
        else:
            raise ConfigurationError(
                f"Argument {key!r} must start with one of: {', '.join(_ARG_PREFIXES)}"
            )
    return grouped


def _option_bool(properties: Mapping[str, Any], name: str, default: bool) -> bool:
    value = properties.get(name, default)
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ConfigurationError(f"Endpoint option {name!r} must be true or false, got {value!r}.")
