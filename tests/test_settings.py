import logging

import pytest

from core.logging_config import configure_logging
from core.settings import Settings


def test_defaults(monkeypatch):
    for name in ("RISK_CALC_APP_TITLE", "RISK_CALC_LOG_LEVEL", "RISK_CALC_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings.app_title == "Trading Risk Calculator"
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["*"]


def test_from_env(monkeypatch):
    monkeypatch.setenv("RISK_CALC_APP_TITLE", "Desk Calculator")
    monkeypatch.setenv("RISK_CALC_LOG_LEVEL", "debug")
    monkeypatch.setenv("RISK_CALC_CORS_ORIGINS", "http://localhost:3000, https://example.com")

    settings = Settings.from_env()
    assert settings.app_title == "Desk Calculator"
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://localhost:3000", "https://example.com"]


def test_bad_log_level():
    with pytest.raises(ValueError):
        Settings(log_level="CHATTY")


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, root.handlers[:]
    try:
        configure_logging("WARNING")
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
    finally:
        root.setLevel(saved_level)
        root.handlers = saved_handlers


def test_importing_main_leaves_environment_and_logging_alone(monkeypatch):
    import importlib

    import main

    monkeypatch.setenv("RISK_CALC_LOG_LEVEL", "CHATTY")
    root = logging.getLogger()
    handlers = root.handlers[:]

    importlib.reload(main)

    assert root.handlers == handlers
    assert not hasattr(main, "app")
    with pytest.raises(ValueError):
        main.create_app()
