"""Structural validation of parsed desktop entry documents."""

from desktop_entry_filter.constants import DESKTOP_ENTRY_SECTION
from desktop_entry_filter.domain.document import Document, Section
from desktop_entry_filter.exceptions import StructureError


def validate_document(document: Document) -> Section:
    """Check that the document holds exactly one Desktop Entry section.

    Args:
        document: Parsed document

    Returns:
        The Desktop Entry section

    Raises:
        StructureError: If there is not exactly one section, or the one
            section is not named Desktop Entry

    """
    if len(document) != 1:
        msg = (
            "Can't process files with more than one section"
            if len(document) > 1
            else "File contains no sections"
        )
        raise StructureError(msg)

    if not document.has_section(DESKTOP_ENTRY_SECTION):
        msg = f"No [{DESKTOP_ENTRY_SECTION}] section found in file"
        raise StructureError(msg)

    return document.section(DESKTOP_ENTRY_SECTION)
