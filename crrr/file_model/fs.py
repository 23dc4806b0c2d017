"""Filesystem access for directory listings and working-directory changes.

``LocalFilesystem`` is the only object that touches the real filesystem.
The browser state machine receives it as a collaborator so tests can swap in
an in-memory provider with the same four methods.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from .types import Entry


class FilesystemError(OSError):
    """Raised when a directory cannot be listed or entered."""


class FilesystemProvider(Protocol):
    def list_directory(self, path: Path) -> list[Entry]: ...

    def is_directory(self, path: Path) -> bool: ...

    def exists(self, path: Path) -> bool: ...

    def change_directory(self, path: Path) -> None: ...

    def current_directory(self) -> Path: ...


def entry_is_directory(entry: os.DirEntry) -> bool:
    """Classify one scandir entry, following symlinks.

    Dangling links and entries that vanish mid-scan count as files.
    """
    try:
        return entry.is_dir(follow_symlinks=True)
    except OSError:
        return False


def list_entries(directory: Path) -> list[Entry]:
    """Return the immediate children of ``directory`` in scan order.

    Raises ``FilesystemError`` when the directory is unreadable or gone.
    """
    try:
        with os.scandir(directory) as children:
            return [Entry(name=child.name, is_dir=entry_is_directory(child)) for child in children]
    except OSError as exc:
        raise FilesystemError(f"cannot list {directory}: {exc.strerror or exc}") from exc


class LocalFilesystem:
    """Filesystem provider backed by ``os``; paths resolve against the process cwd."""

    def list_directory(self, path: Path) -> list[Entry]:
        return list_entries(path)

    def is_directory(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False

    def exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError:
            return False

    def change_directory(self, path: Path) -> None:
        try:
            os.chdir(path)
        except OSError as exc:
            raise FilesystemError(f"cannot enter {path}: {exc.strerror or exc}") from exc

    def current_directory(self) -> Path:
        try:
            return Path.cwd()
        except OSError as exc:
            raise FilesystemError(f"cannot read working directory: {exc.strerror or exc}") from exc


__all__ = [
    "FilesystemError",
    "FilesystemProvider",
    "LocalFilesystem",
    "entry_is_directory",
    "list_entries",
]
