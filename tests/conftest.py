"""Pytest configuration and fixtures for desktop-entry-filter tests."""

import logging
from collections.abc import Callable
from pathlib import Path
from textwrap import dedent

import pytest

SAMPLE_DESKTOP_FILE = """\
[Desktop Entry]
Version=1.0
Type=Application
Name=Text Editor
GenericName=Editor
Comment=Edit text files
Exec=editor %U
TryExec=editor
Icon=editor
Categories=Utility;TextEditor;
NoDisplay=false
StartupNotify=true
X-GNOME-UsesNotifications=true
MimeType=text/html;application/pdf;image/png;
"""


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("desktop_entry_filter"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep settings and logs away from the user's home directory."""
    base = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("DESKTOP_ENTRY_FILTER_CONFIG_DIR", str(base))
    monkeypatch.setenv("DESKTOP_ENTRY_FILTER_LOG_DIR", str(base / "logs"))
    return base


@pytest.fixture
def sample_content() -> str:
    """Return a representative desktop entry file."""
    return SAMPLE_DESKTOP_FILE


@pytest.fixture
def write_desktop_file(tmp_path) -> Callable[..., Path]:
    """Return a factory writing desktop files into tmp_path."""

    def _write(content: str, name: str = "app.desktop") -> Path:
        path = tmp_path / name
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write
