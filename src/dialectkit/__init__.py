"""
dialectkit public package initialization.

Per-database policy objects consumed by SQL renderers: identifier-generation
policies, value converters, and naming strategies.
"""

from .conversion import (  # noqa: F401
    NO_NATIVE_REPRESENTATION,
    ConverterDirection,
    ConverterEntry,
    ConverterRegistry,
    register_interval_factory,
)
from .dialects import (  # noqa: F401
    AnsiDialect,
    Dialect,
    IdGeneration,
    MySQLDialect,
    OracleDialect,
    PostgresDialect,
    SQLiteDialect,
    get_dialect,
    resolve_dialect,
)
from .errors import (  # noqa: F401
    ConversionFailedError,
    ConverterUnavailableError,
    DialectConfigurationError,
    DialectError,
    NamingConfigurationError,
)
from .render import RenderNamingStrategy  # noqa: F401
from .sql import Column, Table  # noqa: F401

__all__ = [
    "Dialect",
    "AnsiDialect",
    "OracleDialect",
    "PostgresDialect",
    "MySQLDialect",
    "SQLiteDialect",
    "IdGeneration",
    "get_dialect",
    "resolve_dialect",
    "ConverterEntry",
    "ConverterDirection",
    "ConverterRegistry",
    "NO_NATIVE_REPRESENTATION",
    "register_interval_factory",
    "RenderNamingStrategy",
    "Column",
    "Table",
    "DialectError",
    "DialectConfigurationError",
    "NamingConfigurationError",
    "ConverterUnavailableError",
    "ConversionFailedError",
]
