"""
Dialect strategy interfaces describing per-database policies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Tuple

if TYPE_CHECKING:
    from ..conversion.converters import ConverterEntry
    from ..render.naming import RenderNamingStrategy


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_returning: bool = False
    supports_savepoints: bool = True
    supports_partial_indexes: bool = False
    supports_schema_namespaces: bool = False


@dataclass(frozen=True)
class IdGeneration:
    """
    How generated primary keys are retrieved after an insert.

    ``driver_requires_key_column_names`` tells whether the driver must be given
    the key column names explicitly to return generated values.
    """

    driver_requires_key_column_names: bool = False


DEFAULT_ID_GENERATION = IdGeneration()


class Dialect(Protocol):
    """
    Strategy interface consumed by renderers and conversion services.
    """

    @property
    def name(self) -> str: ...

    @property
    def param_style(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    @property
    def id_generation(self) -> IdGeneration: ...

    @property
    def naming_strategy(self) -> "RenderNamingStrategy": ...

    def converters(self) -> Tuple["ConverterEntry", ...]: ...

    def quoting_naming_strategy(self) -> "RenderNamingStrategy": ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def limit_clause(self, limit: int | None, offset: int | None) -> str: ...

    def parameter_placeholder(self, position: int | None = None) -> str: ...

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str: ...
