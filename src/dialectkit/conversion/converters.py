"""
Converter entries translating values between generic and driver representations.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from numbers import Number
from typing import Any, Callable, Optional

from ..errors import ConverterUnavailableError


class ConverterDirection(enum.Enum):
    """
    Direction tag of a converter entry.

    ``READING`` converters turn a value fetched from the driver into the
    generic representation; ``WRITING`` converters do the opposite before a
    value is bound as a parameter.
    """

    READING = "reading"
    WRITING = "writing"


class NativeRepresentation(enum.Enum):
    NO_NATIVE_REPRESENTATION = "no native representation"

    def __repr__(self) -> str:
        return self.value.upper().replace(" ", "_")


NO_NATIVE_REPRESENTATION = NativeRepresentation.NO_NATIVE_REPRESENTATION


@dataclass(frozen=True)
class ConverterEntry:
    """
    One directional, typed value transform.

    ``available`` is an optional zero-argument predicate telling whether the
    requirements of the transform are met in the running process. Entries
    whose predicate is false are skipped when a registry installs them and
    refuse to run.
    """

    name: str
    source: type
    target: type
    direction: ConverterDirection
    transform: Callable[[Any], Any]
    available: Optional[Callable[[], bool]] = None

    @property
    def is_reading(self) -> bool:
        return self.direction is ConverterDirection.READING

    @property
    def is_writing(self) -> bool:
        return self.direction is ConverterDirection.WRITING

    def is_available(self) -> bool:
        if self.available is None:
            return True
        return bool(self.available())

    def convert(self, value: Any) -> Any:
        if value is None:
            return None
        if not self.is_available():
            raise ConverterUnavailableError(
                f"Converter '{self.name}' is not available in this environment"
            )
        return self.transform(value)

    def __call__(self, value: Any) -> Any:
        return self.convert(value)


def reading_converter(
    source: type, target: type, *, available: Optional[Callable[[], bool]] = None
) -> Callable[[Callable[[Any], Any]], ConverterEntry]:
    """
    Decorator turning a transform function into a reading :class:`ConverterEntry`.
    """

    def decorator(func: Callable[[Any], Any]) -> ConverterEntry:
        return ConverterEntry(func.__name__, source, target, ConverterDirection.READING, func, available)

    return decorator


def writing_converter(
    source: type, target: type, *, available: Optional[Callable[[], bool]] = None
) -> Callable[[Callable[[Any], Any]], ConverterEntry]:
    def decorator(func: Callable[[Any], Any]) -> ConverterEntry:
        return ConverterEntry(func.__name__, source, target, ConverterDirection.WRITING, func, available)

    return decorator


@reading_converter(Number, bool)
def number_to_boolean(number: Number) -> bool:
    # Lossy: 7 reads as True and writes back as 1.
    return number != 0


@writing_converter(bool, int)
def boolean_to_integer(value: bool) -> int:
    return 1 if value else 0


@reading_converter(datetime, datetime)
def timestamp_at_utc_to_aware_datetime(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
