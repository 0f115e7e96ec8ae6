"""
Dialect strategy registry.
"""

from .ansi import AnsiDialect
from .base import DEFAULT_ID_GENERATION, Dialect, DialectCapabilities, IdGeneration
from .mysql import MySQLDialect
from .oracle import OracleDialect
from .postgres import PostgresDialect
from .resolver import (
    available_dialects,
    dialect_from_env,
    get_dialect,
    register_dialect,
    resolve_dialect,
)
from .sqlite import SQLiteDialect

__all__ = [
    "Dialect",
    "DialectCapabilities",
    "IdGeneration",
    "DEFAULT_ID_GENERATION",
    "AnsiDialect",
    "OracleDialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "available_dialects",
    "dialect_from_env",
    "get_dialect",
    "register_dialect",
    "resolve_dialect",
]
