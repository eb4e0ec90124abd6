"""Tests for settings loading and path resolution."""

from pathlib import Path

from pytest import MonkeyPatch

from desktop_entry_filter.config import Paths, SettingsManager
from desktop_entry_filter.config import settings as settings_module


def test_defaults_when_file_missing(tmp_path):
    settings = SettingsManager(tmp_path / "settings.conf").load_settings()
    assert settings["log_level"] == "INFO"
    assert settings["console_log_level"] == "WARNING"
    assert settings["file_enabled"] is False


def test_reads_values(tmp_path):
    settings_file = tmp_path / "settings.conf"
    settings_file.write_text(
        "[DEFAULT]\n"
        "log_level = debug  # verbose file log\n"
        "console_log_level = ERROR\n"
        "\n"
        "[logging]\n"
        "file_enabled = yes\n"
    )
    settings = SettingsManager(settings_file).load_settings()
    assert settings["log_level"] == "DEBUG"
    assert settings["console_log_level"] == "ERROR"
    assert settings["file_enabled"] is True


def test_invalid_level_falls_back(tmp_path, caplog):
    settings_file = tmp_path / "settings.conf"
    settings_file.write_text("[DEFAULT]\nlog_level = LOUD\n")
    settings = SettingsManager(settings_file).load_settings()
    assert settings["log_level"] == "INFO"
    assert "Invalid log level" in caplog.text


def test_invalid_boolean_falls_back(tmp_path, caplog):
    settings_file = tmp_path / "settings.conf"
    settings_file.write_text("[logging]\nfile_enabled = perhaps\n")
    settings = SettingsManager(settings_file).load_settings()
    assert settings["file_enabled"] is False
    assert "Invalid file_enabled value" in caplog.text


def test_malformed_file_yields_defaults(tmp_path, caplog):
    settings_file = tmp_path / "settings.conf"
    settings_file.write_text("log_level = DEBUG\n")
    settings = SettingsManager(settings_file).load_settings()
    assert settings["log_level"] == "INFO"
    assert "Ignoring settings file" in caplog.text


def test_default_settings_file_uses_override(isolated_config):
    assert SettingsManager().settings_file == isolated_config / "settings.conf"


class TestPaths:
    """Test config directory resolution."""

    def test_override(self, monkeypatch: MonkeyPatch, tmp_path):
        monkeypatch.setenv("DESKTOP_ENTRY_FILTER_CONFIG_DIR", str(tmp_path))
        assert Paths.config_dir() == tmp_path

    def test_xdg_config_home(self, monkeypatch: MonkeyPatch, tmp_path):
        monkeypatch.delenv("DESKTOP_ENTRY_FILTER_CONFIG_DIR", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert Paths.config_dir() == tmp_path / "desktop-entry-filter"

    def test_home_fallback(self, monkeypatch: MonkeyPatch):
        monkeypatch.delenv("DESKTOP_ENTRY_FILTER_CONFIG_DIR", raising=False)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        assert Paths.config_dir() == (
            Path.home() / ".config" / "desktop-entry-filter"
        )

    def test_settings_file(self, monkeypatch: MonkeyPatch, tmp_path):
        monkeypatch.setenv("DESKTOP_ENTRY_FILTER_CONFIG_DIR", str(tmp_path))
        assert Paths.settings_file() == tmp_path / "settings.conf"


def test_settings_logger_uses_package_root():
    logger = settings_module.logger
    assert logger.name == "desktop_entry_filter.config.settings"
    ancestors = []
    current = logger.parent
    while current is not None:
        ancestors.append(current.name)
        current = current.parent
    assert "desktop_entry_filter" in ancestors
