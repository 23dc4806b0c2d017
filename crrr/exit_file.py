"""Exit-communication file read by the enclosing shell wrapper.

A child process cannot change its parent shell's directory, so on
select-and-exit the browser writes the absolute working directory to a
well-known path. The wrapper ``cd``s into its contents and deletes it.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = Path("/tmp/crrr")


def remove_stale_output(output_path: Path) -> None:
    """Delete a leftover file from a previous run so the shell never reuses it."""
    try:
        output_path.unlink()
    except FileNotFoundError:
        return
    logger.debug("removed stale %s", output_path)


def write_exit_directory(output_path: Path, directory: Path) -> None:
    """Write ``directory`` as the file's sole content, without a trailing newline."""
    output_path.write_text(str(directory.absolute()), encoding="utf-8")
    logger.info("wrote %s to %s", directory, output_path)
