import logging

import pytest
import structlog
from structlog.testing import capture_logs

from datapoint_client import converters
from datapoint_client import logging as dp_logging
from datapoint_client.config import LoggingConfig


@pytest.fixture
def isolated_structlog(monkeypatch):
    saved = structlog.get_config()
    monkeypatch.setattr(dp_logging, "_configured", False)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    yield
    structlog.configure(**saved)


def test_setup_runs_once_unless_forced(monkeypatch):
    calls = []
    monkeypatch.setattr(structlog, "configure", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(dp_logging, "_configured", False)

    dp_logging.setup_logging(LoggingConfig(level="WARNING", json=False))
    dp_logging.setup_logging(LoggingConfig(level="DEBUG", json=True))
    assert len(calls) == 1

    dp_logging.setup_logging(LoggingConfig(level="DEBUG", json=True), force=True)
    assert len(calls) == 2
    assert calls[0]["cache_logger_on_first_use"] is False


def test_get_logger_does_not_configure(monkeypatch):
    calls = []
    monkeypatch.setattr(structlog, "configure", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(dp_logging, "_configured", False)

    dp_logging.get_logger("datapoint_client.test")

    assert calls == []
    assert dp_logging._configured is False


def test_application_pipeline_receives_client_events(isolated_structlog):
    seen = []

    def collect(logger, method_name, event_dict):
        seen.append((method_name, event_dict["event"]))
        raise structlog.DropEvent

    structlog.configure(
        processors=[collect],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )

    dp_logging.get_logger("app").warning("hello")
    converters.parse_elevation("abc", context="site 1")

    assert seen == [("warning", "hello"), ("warning", "convert.elevation_invalid")]


def test_forced_reconfigure_reaches_module_loggers(isolated_structlog):
    dp_logging.setup_logging(LoggingConfig(level="WARNING", json=True), force=True)
    with capture_logs() as logs:
        converters.parse_elevation("abc", context="first")
    assert [entry["context"] for entry in logs] == ["first"]

    dp_logging.setup_logging(LoggingConfig(level="ERROR", json=True), force=True)
    with capture_logs() as logs:
        converters.parse_elevation("abc", context="second")
    assert logs == []


def test_renderer_follows_json_flag():
    json_chain = dp_logging._processors(LoggingConfig(json=True))
    console_chain = dp_logging._processors(LoggingConfig(json=False))

    assert isinstance(json_chain[-1], structlog.processors.JSONRenderer)
    assert isinstance(console_chain[-1], structlog.dev.ConsoleRenderer)
