"""Exceptions raised while resolving the agent configuration."""

from qan_agent.settings import QANConfig


class QANConfigError(Exception):
    """Base class for configuration errors."""


class MySQLConnectionError(QANConfigError, ConnectionError):
    """Exception raised when the server connection cannot be established."""


class VariableReadError(QANConfigError):
    """Exception raised when a global variable cannot be read or parsed."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"cannot read global variable '{name}': {reason}")
        self.name = name
        self.reason = reason


class ConfigValidationError(QANConfigError, ValueError):
    """Exception raised when an override value is malformed or out of range.

    Attributes:
        field: Name of the offending override key, e.g. ``Interval``
        value: The raw override value as supplied
        config: Best-effort configuration holding only the overrides
            accepted before the failing one
    """

    def __init__(
        self,
        field: str,
        value: str,
        message: str,
        config: QANConfig | None = None,
    ):
        super().__init__(message)
        self.field = field
        self.value = value
        self.config = config


class UnsupportedStrategyError(QANConfigError, ValueError):
    """Exception raised for an unknown collection strategy."""

    def __init__(self, strategy: str):
        super().__init__(
            f"invalid CollectFrom: '{strategy}'; expected 'slowlog' or 'perfschema'"
        )
        self.strategy = strategy
