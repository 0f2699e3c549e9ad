import json
import logging

from inwords.config.logging import JsonFormatter, configure_logging
from inwords.config.settings import Settings, get_settings


def test_settings_defaults(monkeypatch, fresh_settings):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_JSON", raising=False)
    s = get_settings()
    assert s.LOG_LEVEL == "INFO"
    assert s.LOG_JSON is True


def test_settings_from_env(monkeypatch, fresh_settings):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_JSON", "off")
    s = Settings.load()
    assert s.LOG_LEVEL == "WARNING"
    assert s.LOG_JSON is False


def test_settings_cached(fresh_settings):
    assert get_settings() is get_settings()


def test_json_formatter_shape():
    record = logging.LogRecord("inwords.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "inwords.test"
    assert payload["message"] == "hello world"


def test_configure_logging_installs_single_root_handler(monkeypatch, fresh_settings):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    configure_logging()
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert root.level == logging.DEBUG
