"""Coerces string-typed queue arguments into the types RabbitMQ expects.

Configuration sources such as environment variables or URI options can only
produce strings, while the broker rejects e.g. ``x-message-ttl="1000"`` with a
``PRECONDITION_FAILED``. Only a handful of well-known keys are rewritten;
everything else is passed through untouched.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, Mapping

from rabbit_topology.errors import ConfigurationError

DEAD_LETTER_EXCHANGE_KEY = "x-dead-letter-exchange"
DEAD_LETTER_ROUTING_KEY_KEY = "x-dead-letter-routing-key"
QUEUE_LENGTH_LIMIT_KEY = "x-max-length"
QUEUE_MAX_PRIORITY_KEY = "x-max-priority"
QUEUE_MESSAGE_TTL_KEY = "x-message-ttl"
QUEUE_TTL_KEY = "x-expires"
QUEUE_SINGLE_ACTIVE_CONSUMER_KEY = "x-single-active-consumer"

_INT64_RANGE = (-(2**63), 2**63 - 1)
_INT32_RANGE = (-(2**31), 2**31 - 1)
_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def _integer_parser(bounds: tuple[int, int]) -> Callable[[str, str], int]:
    low, high = bounds

    def parse(key: str, raw: str) -> int:
        if not _INTEGER_PATTERN.match(raw):
            raise ConfigurationError(f"Queue argument {key!r} must be an integer, got {raw!r}.")
        value = int(raw)
        if not low <= value <= high:
            raise ConfigurationError(
                f"Queue argument {key!r} is out of range [{low}, {high}]: {raw!r}."
            )
        return value

    return parse


def _parse_boolean(key: str, raw: str) -> bool:
    # Anything other than "true" reads as false, matching how endpoint flags were always parsed.
    return raw.lower() == "true"


_COERCIONS: Dict[str, Callable[[str, str], Any]] = {
    QUEUE_LENGTH_LIMIT_KEY: _integer_parser(_INT64_RANGE),
    QUEUE_MAX_PRIORITY_KEY: _integer_parser(_INT32_RANGE),
    QUEUE_MESSAGE_TTL_KEY: _integer_parser(_INT64_RANGE),
    QUEUE_TTL_KEY: _integer_parser(_INT64_RANGE),
    QUEUE_SINGLE_ACTIVE_CONSUMER_KEY: _parse_boolean,
}


def normalize_queue_arguments(arguments: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``arguments`` with well-known string values coerced.

    Values that are already native (or keys that are absent) are left as they
    are, so applying this twice yields the same map as applying it once.

    Raises:
        ConfigurationError: if a numeric argument holds a non-integer string or
            a value outside the range the broker protocol allows.
    """
    normalized = dict(arguments)
    for key, coerce in _COERCIONS.items():
        value = normalized.get(key)
        if isinstance(value, str):
            normalized[key] = coerce(key, value)
    return normalized
