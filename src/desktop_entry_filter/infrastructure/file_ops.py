"""File operations for rewriting desktop entry files.

Files are replaced atomically: the new content goes to a temporary file in
the target's directory and is renamed over the target only after it has
been fully written and synced, and the directory is synced after the
rename. On any failure before the rename the temporary file is removed and
the target keeps its previous content.
"""

import contextlib
import os
import shutil
import tempfile
from collections.abc import Iterator
from pathlib import Path
from typing import IO

from desktop_entry_filter.constants import (
    ATOMIC_WRITE_TMP_PREFIX,
    ATOMIC_WRITE_TMP_SUFFIX,
)
from desktop_entry_filter.exceptions import FileAccessError
from desktop_entry_filter.logger import get_logger

logger = get_logger(__name__)


@contextlib.contextmanager
def atomic_write(path: Path) -> Iterator[IO[bytes]]:
    """Open a temporary file that replaces path when the block succeeds.

    Args:
        path: File to replace

    Yields:
        Binary file object to write the new content to

    Raises:
        OSError: If the temporary file cannot be created or committed

    """
    with tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        prefix=f"{ATOMIC_WRITE_TMP_PREFIX}{path.name}.",
        suffix=ATOMIC_WRITE_TMP_SUFFIX,
        delete=False,
    ) as tmp_file:
        temp_path = Path(tmp_file.name)
        try:
            yield tmp_file
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        except BaseException:
            tmp_file.close()
            temp_path.unlink(missing_ok=True)
            raise

    try:
        if path.exists():
            shutil.copymode(path, temp_path)
        temp_path.replace(path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    logger.debug("Replaced %s via %s", path, temp_path.name)

    try:
        _fsync_directory(path.parent)
    except OSError as e:
        # The new content is already in place at this point
        logger.warning("Could not sync directory of %s: %s", path, e)


def _fsync_directory(directory: Path) -> None:
    """Flush a directory entry so a completed rename survives a crash."""
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def write_atomically(path: Path, data: bytes) -> None:
    """Replace the contents of path with data atomically.

    Args:
        path: File to replace
        data: New file contents

    Raises:
        FileAccessError: If writing or committing the new content fails

    """
    try:
        with atomic_write(path) as f:
            f.write(data)
    except OSError as e:
        msg = f"Cannot write file: {e.strerror or e}"
        raise FileAccessError(msg) from e
