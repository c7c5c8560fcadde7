import importlib

import pytest

from price_order import config


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    # Restore module values from the clean environment for later tests
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    reload_config()
    assert config.APP_HOST == "0.0.0.0"
    assert config.APP_PORT == 8010
    assert config.LOG_LEVEL == "INFO"


def test_environment_overrides(monkeypatch, reload_config):
    monkeypatch.setenv("APP_PORT", "9100")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    reload_config()
    assert config.APP_PORT == 9100
    assert config.LOG_LEVEL == "DEBUG"
