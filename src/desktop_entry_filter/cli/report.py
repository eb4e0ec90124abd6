"""Output formatting for processing results."""

from typing import Any

import orjson

from desktop_entry_filter.constants import DESKTOP_FILE_ENCODING
from desktop_entry_filter.core.processor import FileResult


def format_dry_run(results: list[FileResult]) -> str:
    """Format rendered files for dry-run output.

    Each block is preceded by a ``<path>:`` label when more than one file
    was given. Failed files produce no block.

    Args:
        results: Results in input order

    Returns:
        Text to print on standard output

    """
    label = len(results) > 1
    blocks = []
    for result in results:
        if result.content is None:
            continue
        text = result.content.decode(DESKTOP_FILE_ENCODING)
        if label:
            blocks.append(f"{result.path}:\n{text}")
        else:
            blocks.append(text)
    return "\n".join(blocks)


def result_to_dict(
    result: FileResult,
    dry_run: bool,  # noqa: FBT001
) -> dict[str, Any]:
    """Convert a result into a JSON-serializable dictionary."""
    content = None
    if dry_run and result.content is not None:
        content = result.content.decode(DESKTOP_FILE_ENCODING)
    return {
        "path": str(result.path),
        "status": "ok" if result.ok else "error",
        "changed": result.changed,
        "error_kind": result.error.kind if result.error else None,
        "message": str(result.error) if result.error else None,
        "content": content,
    }


def format_json_report(
    results: list[FileResult],
    dry_run: bool,  # noqa: FBT001
) -> str:
    """Serialize all results as an indented JSON array."""
    return orjson.dumps(
        [result_to_dict(result, dry_run) for result in results],
        option=orjson.OPT_INDENT_2,
    ).decode()
