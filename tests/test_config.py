import logging

import main
from config import Settings


def test_settings_defaults(monkeypatch):
    for name in ("APP_NAME", "DEBUG", "LOG_LEVEL", "LIB_CLI_OUTPUT", "DATETIME_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.app_name == "Library Desk"
    assert settings.debug is False
    assert settings.log_level == "WARNING"
    assert settings.output_mode == "plain"
    assert settings.datetime_format == "%d.%m.%Y %H:%M:%S"
    assert settings.effective_log_level == "WARNING"

def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "info")
    monkeypatch.setenv("LIB_CLI_OUTPUT", "JSON")
    monkeypatch.delenv("DEBUG", raising=False)

    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.output_mode == "json"
    assert settings.effective_log_level == "INFO"

def test_debug_forces_debug_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("DEBUG", "yes")

    settings = Settings()

    assert settings.debug is True
    assert settings.effective_log_level == "DEBUG"

def test_configure_logging_uses_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr(main, "settings", Settings())

    assert main.configure_logging() == logging.INFO
    assert logging.getLogger("library_desk").level == logging.INFO

def test_configure_logging_debug_flag(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setattr(main, "settings", Settings())

    main.configure_logging()

    assert logging.getLogger("library_desk").level == logging.DEBUG
    assert logging.getLogger("library_desk.ledger").isEnabledFor(logging.DEBUG)

def test_unknown_log_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr(main, "settings", Settings())

    assert main.configure_logging() == logging.WARNING
