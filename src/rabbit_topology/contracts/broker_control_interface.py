"""Defines the contract for issuing topology commands to a broker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class IBrokerControl(ABC):
    """The declare/bind capability a broker channel offers to the provisioner.

    Every call blocks until the broker confirms it and raises the client's own
    error when the broker refuses it. Implementations are not expected to be
    reentrant; callers sharing one channel must serialize provisioning.
    """

    @abstractmethod
    def declare_exchange(
        self,
        name: str,
        exchange_type: str,
        durable: bool,
        auto_delete: bool,
        arguments: Mapping[str, Any],
    ) -> None:
        """Create the exchange, or verify an existing one has equivalent properties."""

    @abstractmethod
    def declare_exchange_passive(self, name: str) -> None:
        """Verify the exchange exists without creating or altering it."""

    @abstractmethod
    def declare_queue(
        self,
        name: str,
        durable: bool,
        exclusive: bool,
        auto_delete: bool,
        arguments: Mapping[str, Any],
    ) -> None:
        """Create the queue, or verify an existing one has equivalent properties."""

    @abstractmethod
    def declare_queue_passive(self, name: str) -> None:
        """Verify the queue exists without creating or altering it."""

    @abstractmethod
    def bind_queue(
        self,
        queue: str,
        exchange: str,
        routing_key: str,
        arguments: Mapping[str, Any],
    ) -> None:
        """Bind ``queue`` to ``exchange`` using ``routing_key``."""
