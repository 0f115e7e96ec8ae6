import logging
import types
from collections import namedtuple
from datetime import timedelta

import pytest
from dateutil.relativedelta import relativedelta

from dialectkit.conversion import (
    NO_NATIVE_REPRESENTATION,
    OracledbIntervalFactory,
    duration_to_interval_ds,
    interval_factory,
    period_to_interval_ym,
    register_interval_factory,
)
from dialectkit.conversion import intervals
from dialectkit.errors import ConversionFailedError, DialectConfigurationError

IntervalYM = namedtuple("IntervalYM", "years months")


@pytest.fixture(autouse=True)
def isolated_probe(monkeypatch):
    intervals.reset_interval_factory()
    monkeypatch.setattr(intervals, "entry_points", lambda group: [])
    yield
    intervals.reset_interval_factory()


@pytest.fixture
def driver_calls(monkeypatch):
    calls = []
    fake_driver = types.SimpleNamespace(IntervalYM=IntervalYM)

    def load():
        calls.append("load")
        return fake_driver

    monkeypatch.setattr(intervals, "_load_driver", load)
    return calls


@pytest.fixture
def no_driver(monkeypatch):
    calls = []

    def load():
        calls.append("load")
        return None

    monkeypatch.setattr(intervals, "_load_driver", load)
    return calls


def test_none_short_circuits_before_probing(monkeypatch):
    def fail():
        raise AssertionError("probed")

    monkeypatch.setattr(intervals, "_discover", fail)
    assert period_to_interval_ym(None) is None
    assert duration_to_interval_ds(None) is None


def test_missing_driver_yields_no_native_representation(no_driver):
    assert period_to_interval_ym(relativedelta(years=1, months=2)) is NO_NATIVE_REPRESENTATION
    assert duration_to_interval_ds(timedelta(days=3)) is NO_NATIVE_REPRESENTATION


def test_missing_driver_is_probed_on_every_call(no_driver):
    duration_to_interval_ds(timedelta(seconds=1))
    duration_to_interval_ds(timedelta(seconds=2))
    assert no_driver == ["load", "load"]


def test_missing_driver_warns_once(no_driver, caplog):
    caplog.set_level(logging.WARNING, logger="dialectkit.conversion.intervals")
    period_to_interval_ym(relativedelta(months=1))
    period_to_interval_ym(relativedelta(months=2))
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1


def test_driver_without_interval_type_is_unavailable(monkeypatch):
    monkeypatch.setattr(intervals, "_load_driver", lambda: types.SimpleNamespace())
    assert interval_factory() is None


def test_available_driver_builds_native_values(driver_calls):
    assert period_to_interval_ym(relativedelta(years=1, months=14)) == IntervalYM(2, 2)
    assert duration_to_interval_ds(timedelta(days=1, seconds=5)) == timedelta(days=1, seconds=5)


def test_positive_probe_is_cached(driver_calls):
    period_to_interval_ym(relativedelta(months=1))
    duration_to_interval_ds(timedelta(minutes=1))
    assert driver_calls == ["load"]
    assert isinstance(interval_factory(), OracledbIntervalFactory)


def test_sub_month_components_fail_conversion(driver_calls):
    with pytest.raises(ConversionFailedError):
        period_to_interval_ym(relativedelta(months=1, days=3))


def test_absolute_relativedelta_fails_conversion(driver_calls):
    with pytest.raises(ConversionFailedError):
        period_to_interval_ym(relativedelta(year=2024))


class BrokenFactory:
    def year_to_month(self, period):
        raise ValueError("bad period")

    def day_to_second(self, duration):
        raise OverflowError("bad duration")


def test_factory_failures_are_wrapped_with_cause(no_driver):
    register_interval_factory(BrokenFactory())
    with pytest.raises(ConversionFailedError) as excinfo:
        period_to_interval_ym(relativedelta(years=1))
    assert isinstance(excinfo.value.cause, ValueError)
    assert excinfo.value.__cause__ is excinfo.value.cause

    with pytest.raises(ConversionFailedError) as excinfo:
        duration_to_interval_ds(timedelta(days=1))
    assert isinstance(excinfo.value.__cause__, OverflowError)
    assert no_driver == []


def test_failure_does_not_affect_later_conversions(driver_calls):
    with pytest.raises(ConversionFailedError):
        period_to_interval_ym(relativedelta(days=1))
    assert period_to_interval_ym(relativedelta(years=3)) == IntervalYM(3, 0)


def test_registered_factory_takes_precedence(driver_calls):
    class TupleFactory:
        def year_to_month(self, period):
            return ("YM", period.years, period.months)

        def day_to_second(self, duration):
            return ("DS", duration.total_seconds())

    register_interval_factory(TupleFactory())
    assert period_to_interval_ym(relativedelta(months=5)) == ("YM", 0, 5)
    assert duration_to_interval_ds(timedelta(seconds=90)) == ("DS", 90.0)
    assert driver_calls == []


def test_register_rejects_incomplete_factory():
    with pytest.raises(DialectConfigurationError):
        register_interval_factory(object())


def test_entry_point_factory_is_discovered(monkeypatch, no_driver):
    class PluginFactory:
        def year_to_month(self, period):
            return "plugin-ym"

        def day_to_second(self, duration):
            return "plugin-ds"

    entry_point = types.SimpleNamespace(name="plugin", load=lambda: PluginFactory)
    monkeypatch.setattr(intervals, "entry_points", lambda group: [entry_point])
    assert period_to_interval_ym(relativedelta(months=1)) == "plugin-ym"
    assert no_driver == []


def test_broken_entry_point_is_a_configuration_error(monkeypatch):
    def load():
        raise ImportError("missing module")

    entry_point = types.SimpleNamespace(name="broken", load=load)
    monkeypatch.setattr(intervals, "entry_points", lambda group: [entry_point])
    with pytest.raises(DialectConfigurationError):
        interval_factory()


def test_entry_point_factory_constructor_failure_is_a_configuration_error(monkeypatch):
    class ExplodingFactory:
        def __init__(self):
            raise RuntimeError("boom")

    entry_point = types.SimpleNamespace(name="exploding", load=lambda: ExplodingFactory)
    monkeypatch.setattr(intervals, "entry_points", lambda group: [entry_point])
    with pytest.raises(DialectConfigurationError) as excinfo:
        period_to_interval_ym(relativedelta(months=1))
    assert isinstance(excinfo.value.__cause__, RuntimeError)
