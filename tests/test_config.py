import pytest
import logging
from dataclasses import fields

from tcpping.config import LOG_LEVEL_ENV, Settings, log_level
from tcpping.destination import parse_destination


def test_settings_fields_are_all_consumed():
    """Every Settings field is read by the pinger; the port default lives with destination parsing."""
    assert {f.name for f in fields(Settings)} == {
        "connect_timeout", "interval", "precheck_timeout", "fail_fast_precheck",
    }
    assert parse_destination("example.com").port == 80


@pytest.mark.parametrize("value,expected", [
    ("DEBUG", logging.DEBUG),
    ("info", logging.INFO),
    ("nonsense", logging.WARNING),
])
def test_log_level_from_env(monkeypatch, value, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV, value)
    assert log_level() == expected


def test_log_level_default(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert log_level() == logging.WARNING
