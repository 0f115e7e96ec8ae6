"""
Value converters and the registry that installs them.
"""

from .converters import (
    NO_NATIVE_REPRESENTATION,
    ConverterDirection,
    ConverterEntry,
    NativeRepresentation,
    boolean_to_integer,
    number_to_boolean,
    reading_converter,
    timestamp_at_utc_to_aware_datetime,
    writing_converter,
)
from .intervals import (
    IntervalFactory,
    OracledbIntervalFactory,
    duration_to_interval_ds,
    interval_factory,
    period_to_interval_ym,
    register_interval_factory,
)
from .registry import ConverterRegistry

__all__ = [
    "NO_NATIVE_REPRESENTATION",
    "NativeRepresentation",
    "ConverterDirection",
    "ConverterEntry",
    "ConverterRegistry",
    "IntervalFactory",
    "OracledbIntervalFactory",
    "reading_converter",
    "writing_converter",
    "number_to_boolean",
    "boolean_to_integer",
    "timestamp_at_utc_to_aware_datetime",
    "period_to_interval_ym",
    "duration_to_interval_ds",
    "interval_factory",
    "register_interval_factory",
]
