"""Per-file processing pipeline.

Each file goes through load, validate, filter, render and (outside dry-run)
an atomic write. Files are independent; a failure is recorded for its file
and processing continues with the next one.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from desktop_entry_filter.core.loader import load_document
from desktop_entry_filter.core.mime_filter import filter_mime_type_value
from desktop_entry_filter.core.renderer import render_desktop_entry
from desktop_entry_filter.core.validator import validate_document
from desktop_entry_filter.domain.document import Document
from desktop_entry_filter.exceptions import DesktopEntryFilterError
from desktop_entry_filter.infrastructure.file_ops import write_atomically
from desktop_entry_filter.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FileResult:
    """Outcome of processing one file."""

    path: Path
    content: bytes | None = None
    error: DesktopEntryFilterError | None = None
    changed: bool = False

    @property
    def ok(self) -> bool:
        """Return True if the file was processed successfully."""
        return self.error is None


def transform_document(document: Document) -> bytes:
    """Validate, filter and render a parsed document.

    Raises:
        StructureError: If the document structure is invalid
        MissingAttributeError: If MimeType is missing
        MalformedMediaTypeError: If a MimeType entry fails to parse

    """
    section = validate_document(document)
    mime_types = filter_mime_type_value(section)
    return render_desktop_entry(section, mime_types)


def process_file(path: Path, *, dry_run: bool = False) -> bytes:
    """Run the full pipeline for one file.

    Args:
        path: Desktop entry file
        dry_run: Render only, never touch the file

    Returns:
        Rendered file contents

    Raises:
        DesktopEntryFilterError: Any pipeline failure, with target set to
            the file path

    """
    try:
        content = transform_document(load_document(path))
        if not dry_run:
            write_atomically(path, content)
    except DesktopEntryFilterError as e:
        if e.target is None:
            e.target = str(path)
        raise
    return content


class DesktopFileProcessor:
    """Processes a batch of desktop entry files."""

    def __init__(self, dry_run: bool = False) -> None:  # noqa: FBT001, FBT002
        """Initialize processor.

        Args:
            dry_run: Render only, never write files

        """
        self.dry_run = dry_run

    def process(self, path: Path) -> FileResult:
        """Process one file and capture its outcome."""
        try:
            original = path.read_bytes() if path.is_file() else None
        except OSError:
            original = None

        try:
            content = process_file(path, dry_run=self.dry_run)
        except DesktopEntryFilterError as e:
            logger.debug("Processing %s failed: %s", path, e)
            return FileResult(path=path, error=e)

        changed = content != original
        if self.dry_run:
            logger.debug("Rendered %s (dry run)", path)
        elif changed:
            logger.info("Rewrote %s", path)
        else:
            logger.debug("%s already filtered", path)
        return FileResult(path=path, content=content, changed=changed)

    def process_all(self, paths: Iterable[Path]) -> list[FileResult]:
        """Process files in order, continuing after failures.

        Args:
            paths: Files to process

        Returns:
            One result per path, in input order

        """
        results = [self.process(path) for path in paths]
        failed = sum(1 for result in results if not result.ok)
        logger.debug(
            "Processed %d file(s), %d failed", len(results), failed
        )
        return results
