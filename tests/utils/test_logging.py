import logging

from dialectkit.utils.logging import LOG_LEVEL_ENV, get_logger, resolve_log_level


def test_get_logger_is_namespaced():
    logger = get_logger("tests.logging")
    assert logger.name == "dialectkit.tests.logging"
    assert logging.getLogger("dialectkit").handlers


def test_resolve_log_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert resolve_log_level() == logging.DEBUG
    monkeypatch.setenv(LOG_LEVEL_ENV, "15")
    assert resolve_log_level() == 15


def test_resolve_log_level_falls_back_to_default(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert resolve_log_level(logging.WARNING) == logging.WARNING
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
    assert resolve_log_level(logging.WARNING) == logging.WARNING


def test_logger_records_are_captured(caplog):
    logger = get_logger("tests.capture")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    logger.debug("probe finished")
    assert any(record.message == "probe finished" for record in caplog.records)
