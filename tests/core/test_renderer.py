"""Tests for rendering the reduced desktop entry."""

from desktop_entry_filter.constants import ALLOWED_KEYS
from desktop_entry_filter.core.renderer import (
    render_desktop_entry,
    render_lines,
)
from desktop_entry_filter.domain.document import Section


def test_allowed_keys_in_fixed_order():
    section = Section(
        "Desktop Entry",
        {
            "Icon": "app",
            "Exec": "app %U",
            "Name": "App",
            "Type": "Application",
            "MimeType": "ignored",
        },
    )
    assert render_lines(section, "image/png") == [
        "[Desktop Entry]",
        "Type=Application",
        "Name=App",
        "Exec=app %U",
        "Icon=app",
        "MimeType=image/png",
    ]


def test_drops_keys_outside_allowlist():
    section = Section(
        "Desktop Entry",
        {
            "Name": "App",
            "NoDisplay": "true",
            "X-Custom": "1",
            "Name[de]": "Anwendung",
        },
    )
    output = render_desktop_entry(section, "").decode()
    assert "NoDisplay" not in output
    assert "X-Custom" not in output
    assert "Name[de]" not in output


def test_all_allowed_keys():
    section = Section(
        "Desktop Entry", {key: key.lower() for key in ALLOWED_KEYS}
    )
    lines = render_lines(section, "a/b")
    assert lines[1:-1] == [f"{key}={key.lower()}" for key in ALLOWED_KEYS]


def test_mime_type_line_always_last_even_when_empty():
    section = Section("Desktop Entry", {"Name": "App"})
    assert render_desktop_entry(section, "") == (
        b"[Desktop Entry]\nName=App\nMimeType=\n"
    )


def test_uses_section_name_from_input():
    section = Section("Desktop Entry", {})
    assert render_lines(section, "a/b")[0] == "[Desktop Entry]"


def test_every_line_newline_terminated():
    section = Section("Desktop Entry", {"Name": "App", "Exec": "app"})
    output = render_desktop_entry(section, "image/png")
    assert output.endswith(b"\n")
    assert not output.endswith(b"\n\n")
    assert output.count(b"\n") == 4


def test_encodes_utf8():
    section = Section("Desktop Entry", {"Name": "Café"})
    assert "Name=Café".encode() in render_desktop_entry(section, "")


def test_empty_values_are_kept():
    section = Section("Desktop Entry", {"Comment": ""})
    assert "Comment=" in render_lines(section, "")
