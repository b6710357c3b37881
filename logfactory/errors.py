"""Exception hierarchy for logfactory."""

from __future__ import annotations

from typing import Any


class LogFactoryError(Exception):
    """Base class for all logfactory errors."""


class InvalidIdentityError(LogFactoryError, TypeError):
    """
    Raised when the caller-identity passed to ``get_logger`` is neither a
    function-like value nor an object instance.

    :param value: the rejected value (only its type is kept in the message)
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            "identity must be a function or an object instance, "
            f"got {type(value).__name__}: {value!r}"
        )


class ConfigurationError(LogFactoryError, ValueError):
    """Raised when a configuration names an unknown appender or layout type."""


__all__ = ["LogFactoryError", "InvalidIdentityError", "ConfigurationError"]
