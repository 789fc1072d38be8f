import importlib
import logging
from unittest.mock import MagicMock

import pytest

import library_menu.config as config_module
from library_menu.main import configure_logging, resolve_log_level
from library_menu.utils.ui_helpers import Terminal


@pytest.fixture
def reload_settings(monkeypatch):
    # Settings defaults are read when the module is imported
    def _reload():
        return importlib.reload(config_module).Settings()
    yield _reload
    monkeypatch.undo()
    importlib.reload(config_module)


def test_settings_defaults(monkeypatch, reload_settings):
    for name in ("LIBRARY_CLEAR_SCREEN", "LIBRARY_LOG_LEVEL", "LIBRARY_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    settings = reload_settings()

    assert settings.clear_screen is True
    assert settings.log_level == "WARNING"
    assert settings.log_file is None
    assert settings.welcome_message == "Welcome to the library!"
    assert settings.farewell_message == "Thank you for using the library!"


def test_settings_from_environment(monkeypatch, reload_settings, tmp_path):
    log_file = str(tmp_path / "menu.log")
    monkeypatch.setenv("LIBRARY_CLEAR_SCREEN", "false")
    monkeypatch.setenv("LIBRARY_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LIBRARY_LOG_FILE", log_file)
    settings = reload_settings()

    assert settings.clear_screen is False
    assert settings.log_level == "DEBUG"
    assert settings.log_file == log_file


@pytest.mark.parametrize("raw", ["1", "yes", "TRUE"])
def test_clear_screen_truthy_values(monkeypatch, reload_settings, raw):
    monkeypatch.setenv("LIBRARY_CLEAR_SCREEN", raw)
    assert reload_settings().clear_screen is True


def test_terminal_follows_clear_screen_setting(monkeypatch):
    monkeypatch.setattr("library_menu.utils.ui_helpers.settings.clear_screen", False)
    console = MagicMock()
    Terminal(console=console).clear()
    console.clear.assert_not_called()

    monkeypatch.setattr("library_menu.utils.ui_helpers.settings.clear_screen", True)
    Terminal(console=console).clear()
    console.clear.assert_called_once()


@pytest.mark.parametrize("name, expected", [
    ("DEBUG", logging.DEBUG),
    ("info", logging.INFO),
    (" error ", logging.ERROR),
    ("bogus", logging.WARNING),
    ("basicConfig", logging.WARNING),
    ("", logging.WARNING),
])
def test_resolve_log_level(name, expected):
    assert resolve_log_level(name) == expected


def test_configure_logging_falls_back_to_warning(monkeypatch):
    basic_config = MagicMock()
    monkeypatch.setattr("library_menu.main.logging.basicConfig", basic_config)

    configure_logging("bogus")

    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == logging.WARNING
    assert basic_config.call_args.kwargs["filename"] is None


def test_configure_logging_writes_to_file(monkeypatch, tmp_path):
    basic_config = MagicMock()
    monkeypatch.setattr("library_menu.main.logging.basicConfig", basic_config)
    log_file = str(tmp_path / "menu.log")

    configure_logging("INFO", log_file)

    assert basic_config.call_args.kwargs["level"] == logging.INFO
    assert basic_config.call_args.kwargs["filename"] == log_file
