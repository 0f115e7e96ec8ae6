"""
ANSI SQL dialect providing the defaults other dialects build on.
"""

from __future__ import annotations

from threading import Lock
from typing import ClassVar, Dict, Tuple

from ..conversion.converters import ConverterEntry
from ..render.naming import RenderNamingStrategy, as_is
from .base import DEFAULT_ID_GENERATION, Dialect, DialectCapabilities, IdGeneration


class AnsiDialect:
    """
    Generic dialect: double-quoted identifiers, ``FETCH FIRST`` pagination,
    no key-column requirement and no vendor converters.

    Every dialect class has exactly one instance; calling the class again
    returns it. Subclasses override only what differs for their database.
    """

    __slots__ = ()

    _instances: ClassVar[Dict[type, "AnsiDialect"]] = {}
    _instances_lock: ClassVar[Lock] = Lock()

    name: str = "ansi"
    param_style: str = "qmark"
    capabilities: DialectCapabilities = DialectCapabilities()
    id_generation: IdGeneration = DEFAULT_ID_GENERATION
    naming_strategy: RenderNamingStrategy = as_is()

    def __new__(cls):
        instance = AnsiDialect._instances.get(cls)
        if instance is None:
            with AnsiDialect._instances_lock:
                instance = AnsiDialect._instances.get(cls)
                if instance is None:
                    instance = super().__new__(cls)
                    AnsiDialect._instances[cls] = instance
        return instance

    def converters(self) -> Tuple[ConverterEntry, ...]:
        return ()

    def quoting_naming_strategy(self) -> RenderNamingStrategy:
        return self.naming_strategy.derive(self.quote_identifier)

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str) -> str:
        if "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.quote_identifier(schema)}.{self.quote_identifier(table)}"
        return self.quote_identifier(table_name)

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if offset is not None:
            parts.append(f"OFFSET {offset} ROWS")
        if limit is not None:
            parts.append(f"FETCH FIRST {limit} ROWS ONLY")
        return " ".join(parts)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "?"

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        null_clause = "" if nullable else " NOT NULL"
        return f"{self.quote_identifier(column)} {column_type}{null_clause}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


def get_ansi_dialect() -> Dialect:
    return AnsiDialect()
