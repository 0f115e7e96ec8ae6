"""
Error hierarchy for dialectkit.
"""

from __future__ import annotations


class DialectError(RuntimeError):
    """Base error for dialect-related failures."""


class DialectConfigurationError(DialectError):
    """Raised when a dialect, strategy, or registry is assembled with invalid input."""


class NamingConfigurationError(DialectConfigurationError):
    """Raised when a naming strategy is derived from an invalid transform."""


class ConverterUnavailableError(DialectConfigurationError):
    """Raised when a converter whose requirements are missing is invoked."""


class ConversionFailedError(DialectError):
    """
    Raised when converting a single value fails.

    Whatever the underlying failure was, it is chained as ``__cause__`` and
    also exposed through :attr:`cause`.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
