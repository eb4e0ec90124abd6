"""Loading of desktop entry files into Document objects.

Parsing is delegated to configparser, configured for desktop entry syntax:
keys keep their case, ``=`` is the only delimiter, ``#`` starts a comment,
values are never interpolated and there is no implicit DEFAULT section.
"""

import configparser
from pathlib import Path

from desktop_entry_filter.constants import DESKTOP_FILE_ENCODING
from desktop_entry_filter.domain.document import Document
from desktop_entry_filter.exceptions import FileAccessError, ParseError
from desktop_entry_filter.logger import get_logger

logger = get_logger(__name__)

# Section name that cannot occur in a header line, disables DEFAULT handling
_NO_DEFAULT_SECTION = "\n"

# Byte order mark some editors write at the start of UTF-8 files
_BOM = "\ufeff"


class DesktopFileParser(configparser.ConfigParser):
    """ConfigParser preconfigured for desktop entry files."""

    def __init__(self) -> None:
        """Initialize parser with desktop entry syntax rules."""
        super().__init__(
            delimiters=("=",),
            comment_prefixes=("#",),
            inline_comment_prefixes=None,
            strict=True,
            empty_lines_in_values=False,
            default_section=_NO_DEFAULT_SECTION,
            interpolation=None,
        )

    def optionxform(self, optionstr: str) -> str:
        """Keep attribute keys case-sensitive."""
        return optionstr


def parse_document(text: str, source: str = "<string>") -> Document:
    """Parse desktop entry text into a Document.

    Args:
        text: File contents
        source: Name used in parser error messages

    Returns:
        Parsed document with sections and attributes in source order

    Raises:
        ParseError: If the text is not valid INI-style content or a value
            spans more than one line

    """
    parser = DesktopFileParser()
    try:
        parser.read_string(text.removeprefix(_BOM), source=source)
    except configparser.Error as e:
        raise ParseError(_flatten(str(e))) from e

    sections = {name: dict(parser.items(name)) for name in parser.sections()}
    for name, attributes in sections.items():
        for key, value in attributes.items():
            # configparser folds indented lines into the previous value
            if "\n" in value:
                msg = (
                    f"Indented line after key '{key}' in section [{name}] "
                    "is not a valid entry"
                )
                raise ParseError(msg)

    return Document.from_mapping(sections)


def load_document(path: Path) -> Document:
    """Read and parse a desktop entry file.

    Args:
        path: Path of the file to load

    Returns:
        Parsed document

    Raises:
        FileAccessError: If the file cannot be read
        ParseError: If the file is not valid UTF-8 INI-style text

    """
    logger.debug("Loading %s", path)
    try:
        text = path.read_text(encoding=DESKTOP_FILE_ENCODING)
    except UnicodeDecodeError as e:
        msg = f"File is not valid {DESKTOP_FILE_ENCODING}: {e.reason}"
        raise ParseError(msg) from e
    except OSError as e:
        msg = f"Cannot read file: {e.strerror or e}"
        raise FileAccessError(msg) from e

    document = parse_document(text, source=str(path))
    logger.debug(
        "Parsed %s: sections=%s", path, ", ".join(document.section_names)
    )
    return document


def _flatten(message: str) -> str:
    """Join a multi-line parser message into a single line."""
    return "; ".join(
        line.strip() for line in message.splitlines() if line.strip()
    )
