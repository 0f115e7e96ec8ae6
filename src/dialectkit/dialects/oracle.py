"""
Oracle dialect implementation.
"""

from __future__ import annotations

from typing import Tuple

from ..conversion.converters import (
    ConverterEntry,
    boolean_to_integer,
    number_to_boolean,
    timestamp_at_utc_to_aware_datetime,
)
from ..conversion.intervals import duration_to_interval_ds, period_to_interval_ym
from ..errors import DialectConfigurationError
from ..render.naming import RenderNamingStrategy, to_upper
from .ansi import AnsiDialect
from .base import Dialect, DialectCapabilities, IdGeneration


class OracleDialect(AnsiDialect):
    """
    Oracle dialect using numeric bind placeholders.

    Oracle has no boolean column type before 23c, so booleans are written as
    ``1``/``0`` and any non-zero number reads back as ``True``. Unquoted
    identifiers are folded to upper case.
    """

    __slots__ = ()

    name = "oracle"
    param_style = "numeric"
    capabilities = DialectCapabilities(
        supports_returning=True,
        supports_savepoints=True,
        supports_partial_indexes=False,
        supports_schema_namespaces=True,
    )
    id_generation = IdGeneration(driver_requires_key_column_names=True)
    naming_strategy: RenderNamingStrategy = to_upper()

    def converters(self) -> Tuple[ConverterEntry, ...]:
        return super().converters() + (
            timestamp_at_utc_to_aware_datetime,
            number_to_boolean,
            boolean_to_integer,
            period_to_interval_ym,
            duration_to_interval_ds,
        )

    def parameter_placeholder(self, position: int | None = None) -> str:
        if position is None or position < 1:
            raise DialectConfigurationError("Oracle bind placeholders need a position starting at 1")
        return f":{position}"


def get_oracle_dialect() -> Dialect:
    return OracleDialect()
