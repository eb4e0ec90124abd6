"""Core processing pipeline for desktop entry files."""

from desktop_entry_filter.core.processor import (
    DesktopFileProcessor,
    FileResult,
    process_file,
    transform_document,
)

__all__ = [
    "DesktopFileProcessor",
    "FileResult",
    "process_file",
    "transform_document",
]
