"""Rendering of the reduced desktop entry file."""

from desktop_entry_filter.constants import (
    ALLOWED_KEYS,
    DESKTOP_FILE_ENCODING,
    MIME_TYPE_KEY,
)
from desktop_entry_filter.domain.document import Section


def render_lines(section: Section, mime_types: str) -> list[str]:
    """Build the output lines for a section.

    The header comes first, then every allowed key present in the section
    in ALLOWED_KEYS order, then the MimeType line, which is always last.

    Args:
        section: Validated Desktop Entry section
        mime_types: Filtered MimeType value

    Returns:
        Output lines without line terminators

    """
    lines = [f"[{section.name}]"]
    for key in ALLOWED_KEYS:
        value = section.get(key)
        if value is not None:
            lines.append(f"{key}={value}")
    lines.append(f"{MIME_TYPE_KEY}={mime_types}")
    return lines


def render_desktop_entry(section: Section, mime_types: str) -> bytes:
    """Render a section to file contents, one newline per line."""
    text = "".join(f"{line}\n" for line in render_lines(section, mime_types))
    return text.encode(DESKTOP_FILE_ENCODING)
