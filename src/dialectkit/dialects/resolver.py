"""
Lookup of dialect singletons by product name, DSN, or environment.
"""

from __future__ import annotations

import os
from typing import Callable, Dict, List, Type

from ..errors import DialectConfigurationError
from ..security.dsns import parse_dsn
from ..utils import get_logger
from .ansi import AnsiDialect
from .base import Dialect
from .mysql import MySQLDialect
from .oracle import OracleDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

DSN_ENV = "DIALECTKIT_DSN"

_DIALECT_REGISTRY: Dict[str, Type[AnsiDialect]] = {}

logger = get_logger("dialects.resolver")


def register_dialect(name: str, *aliases: str) -> Callable[[Type[AnsiDialect]], Type[AnsiDialect]]:
    """Decorator registering a dialect class under ``name`` and ``aliases``.

    Dialect instances are shared singletons, so every class in the hierarchy
    must declare ``__slots__ = ()``; classes whose instances would carry a
    ``__dict__`` are rejected.

    Usage:
        @register_dialect('h2')
        class H2Dialect(AnsiDialect):
            __slots__ = ()
            ...
    """

    def decorator(cls: Type[AnsiDialect]) -> Type[AnsiDialect]:
        if not (isinstance(cls, type) and issubclass(cls, AnsiDialect)):
            raise DialectConfigurationError(f"{cls!r} is not an AnsiDialect subclass")
        mutable = [klass.__name__ for klass in cls.__mro__[:-1] if "__slots__" not in vars(klass)]
        if mutable:
            raise DialectConfigurationError(
                f"{cls.__name__} must declare __slots__ = () (missing on {', '.join(mutable)})"
            )
        keys = [key.lower() for key in (name, *aliases)]
        for key in keys:
            registered = _DIALECT_REGISTRY.get(key)
            if registered is not None and registered is not cls:
                raise DialectConfigurationError(
                    f"Dialect name '{key}' is already registered to {registered.__name__}"
                )
        for key in keys:
            _DIALECT_REGISTRY[key] = cls
        return cls

    return decorator


register_dialect("ansi", "sql")(AnsiDialect)
register_dialect("oracle")(OracleDialect)
register_dialect("postgresql", "postgres", "pgsql")(PostgresDialect)
register_dialect("mysql", "mariadb")(MySQLDialect)
register_dialect("sqlite", "sqlite3")(SQLiteDialect)


def available_dialects() -> List[str]:
    """Return registered dialect names, aliases included."""
    return sorted(_DIALECT_REGISTRY)


def get_dialect(name: str) -> Dialect:
    """Return the dialect singleton registered under ``name``."""
    try:
        cls = _DIALECT_REGISTRY[name.strip().lower()]
    except KeyError as exc:
        raise DialectConfigurationError(
            f"Unsupported dialect: {name}. Available: {available_dialects()}"
        ) from exc
    return cls()


def resolve_dialect(value: str) -> Dialect:
    """
    Resolve a dialect from a DSN (``oracle+oracledb://...``) or a bare product name.
    """

    if "://" not in value:
        return get_dialect(value)
    config = parse_dsn(value)
    dialect = get_dialect(config.product)
    logger.debug("Resolved %s to dialect %s", config.redacted(), dialect.name)
    return dialect


def dialect_from_env(env_var: str = DSN_ENV) -> Dialect:
    value = os.getenv(env_var)
    if not value:
        raise DialectConfigurationError(f"Environment variable {env_var} is not set")
    return resolve_dialect(value)
