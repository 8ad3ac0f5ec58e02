"""Decision table turning endpoint switches into provisioning steps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rabbit_topology.endpoint import EndpointConfig


class DeclareMode(Enum):
    """Whether declarations may create entities or only check they exist."""

    ACTIVE = "active"
    PASSIVE = "passive"


class QueueAction(Enum):
    """What happens to a queue during provisioning."""

    NONE = "none"
    DECLARE = "declare"
    DECLARE_AND_BIND = "declare_and_bind"
    # Declarations were skipped but a binding is still wanted, so both ends are
    # checked passively before binding.
    VERIFY_AND_BIND = "verify_and_bind"


def _queue_action(named: bool, skip_declare: bool, skip_bind: bool) -> QueueAction:
    if not named:
        return QueueAction.NONE
    if not skip_declare:
        return QueueAction.DECLARE if skip_bind else QueueAction.DECLARE_AND_BIND
    if not skip_bind:
        return QueueAction.VERIFY_AND_BIND
    return QueueAction.NONE


@dataclass(frozen=True)
class ProvisioningPolicy:
    """The steps one provisioning run performs, evaluated once up front.

    +----------------------+--------------------+------------------+-------------------+
    | queue named          | skip_queue_declare | skip_queue_bind  | queue action      |
    +======================+====================+==================+===================+
    | no                   | any                | any              | NONE              |
    | yes                  | no                 | no               | DECLARE_AND_BIND  |
    | yes                  | no                 | yes              | DECLARE           |
    | yes                  | yes                | no               | VERIFY_AND_BIND   |
    | yes                  | yes                | yes              | NONE              |
    +----------------------+--------------------+------------------+-------------------+

    Dead-letter wiring only happens when a dead-letter exchange is configured
    and ``skip_dead_letter_declare`` is off. Its queue never takes the
    ``VERIFY_AND_BIND`` path because ``skip_queue_declare`` does not apply to it.
    """

    mode: DeclareMode
    declare_dead_letter_exchange: bool
    dead_letter_queue: QueueAction
    declare_exchange: bool
    queue: QueueAction

    @classmethod
    def from_config(cls, config: EndpointConfig) -> ProvisioningPolicy:
        dead_letter = config.dead_letter
        wire_dead_letter = dead_letter.enabled and not config.skip_dead_letter_declare

        if wire_dead_letter:
            dead_letter_queue = _queue_action(
                bool(dead_letter.queue), skip_declare=False, skip_bind=config.skip_queue_bind
            )
        else:
            dead_letter_queue = QueueAction.NONE

        return cls(
            mode=DeclareMode.PASSIVE if config.passive else DeclareMode.ACTIVE,
            declare_dead_letter_exchange=wire_dead_letter,
            dead_letter_queue=dead_letter_queue,
            declare_exchange=not config.skip_exchange_declare,
            queue=_queue_action(
                config.queue.is_named,
                skip_declare=config.skip_queue_declare,
                skip_bind=config.skip_queue_bind,
            ),
        )
