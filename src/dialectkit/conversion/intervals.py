"""
Interval converters backed by optional vendor driver support.

Periods (:class:`dateutil.relativedelta.relativedelta`) and durations
(:class:`datetime.timedelta`) are written as ``INTERVAL YEAR TO MONTH`` and
``INTERVAL DAY TO SECOND`` values. Building those values needs a vendor
driver that may not be installed, so the converters ask for an
:class:`IntervalFactory` each time they run and return
``NO_NATIVE_REPRESENTATION`` when none is available.
"""

from __future__ import annotations

from datetime import timedelta
from importlib.metadata import entry_points
from typing import Any, Optional, Protocol

from dateutil.relativedelta import relativedelta

from ..errors import ConversionFailedError, DialectConfigurationError
from ..utils import get_logger
from .converters import NO_NATIVE_REPRESENTATION, writing_converter

ENTRY_POINT_GROUP = "dialectkit.interval_factories"

_ABSOLUTE_FIELDS = ("year", "month", "day", "weekday", "hour", "minute", "second", "microsecond")
_SUB_MONTH_FIELDS = ("days", "leapdays", "hours", "minutes", "seconds", "microseconds")

logger = get_logger("conversion.intervals")


class IntervalFactory(Protocol):
    """
    Builds native interval values for a vendor driver.
    """

    def year_to_month(self, period: relativedelta) -> Any: ...

    def day_to_second(self, duration: timedelta) -> Any: ...


def _load_driver():
    try:
        import oracledb

        return oracledb
    except ImportError:
        return None


class OracledbIntervalFactory:
    """
    Interval factory using python-oracledb.

    ``INTERVAL YEAR TO MONTH`` values are ``oracledb.IntervalYM`` tuples;
    ``INTERVAL DAY TO SECOND`` values are bound by the driver straight from
    :class:`datetime.timedelta`.
    """

    def __init__(self, driver: Any) -> None:
        self.driver = driver

    @classmethod
    def probe(cls) -> Optional["OracledbIntervalFactory"]:
        driver = _load_driver()
        if driver is None or not hasattr(driver, "IntervalYM"):
            return None
        return cls(driver)

    def year_to_month(self, period: relativedelta) -> Any:
        return self.driver.IntervalYM(years=period.years, months=period.months)

    def day_to_second(self, duration: timedelta) -> Any:
        # bound as DB_TYPE_INTERVAL_DS by the driver
        return duration


_registered: Optional[IntervalFactory] = None
_discovered: Optional[IntervalFactory] = None
_warned = False


def register_interval_factory(factory: Optional[IntervalFactory]) -> None:
    """
    Install ``factory`` ahead of any discovered implementation.

    Passing ``None`` removes an explicit registration.
    """

    global _registered
    if factory is not None:
        for method in ("year_to_month", "day_to_second"):
            if not callable(getattr(factory, method, None)):
                raise DialectConfigurationError(
                    f"Interval factory {factory!r} does not implement {method}()"
                )
    _registered = factory


def reset_interval_factory() -> None:
    global _registered, _discovered, _warned
    _registered = None
    _discovered = None
    _warned = False


def _discover() -> Optional[IntervalFactory]:
    for entry_point in entry_points(group=ENTRY_POINT_GROUP):
        try:
            loaded = entry_point.load()
            factory = loaded() if isinstance(loaded, type) else loaded
        except Exception as exc:
            raise DialectConfigurationError(
                f"Failed to load interval factory '{entry_point.name}'"
            ) from exc
        logger.debug("Using interval factory %s from entry point %s", factory, entry_point.name)
        return factory
    return OracledbIntervalFactory.probe()


def interval_factory() -> Optional[IntervalFactory]:
    """
    Return the interval factory for this process, or ``None`` when the vendor
    support is missing.

    A found factory is remembered; a miss is probed again on the next call.
    """

    global _discovered
    if _registered is not None:
        return _registered
    if _discovered is not None:
        return _discovered
    factory = _discover()
    if factory is not None:
        _discovered = factory
    return factory


def _unavailable(kind: str):
    global _warned
    if not _warned:
        _warned = True
        logger.warning("No vendor support for %s values; writing them is not possible", kind)
    return NO_NATIVE_REPRESENTATION


@writing_converter(relativedelta, object)
def period_to_interval_ym(period: relativedelta) -> Any:
    factory = interval_factory()
    if factory is None:
        return _unavailable("INTERVAL YEAR TO MONTH")
    if any(getattr(period, name) is not None for name in _ABSOLUTE_FIELDS):
        raise ConversionFailedError(f"{period!r} is not a relative period")
    if any(getattr(period, name) for name in _SUB_MONTH_FIELDS):
        raise ConversionFailedError(
            f"{period!r} has components smaller than a month and cannot be written as INTERVAL YEAR TO MONTH"
        )
    try:
        return factory.year_to_month(period)
    except Exception as exc:
        raise ConversionFailedError(
            f"Failed to convert {period!r} to INTERVAL YEAR TO MONTH", cause=exc
        ) from exc


@writing_converter(timedelta, object)
def duration_to_interval_ds(duration: timedelta) -> Any:
    factory = interval_factory()
    if factory is None:
        return _unavailable("INTERVAL DAY TO SECOND")
    try:
        return factory.day_to_second(duration)
    except Exception as exc:
        raise ConversionFailedError(
            f"Failed to convert {duration!r} to INTERVAL DAY TO SECOND", cause=exc
        ) from exc
