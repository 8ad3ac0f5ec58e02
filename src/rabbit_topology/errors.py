"""Errors raised while preparing RabbitMQ topology."""


class ConfigurationError(ValueError):
    """Raised when endpoint configuration cannot be turned into broker arguments."""
