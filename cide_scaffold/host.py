"""
Host capabilities used by the builder and the name guesser.

The builder never touches the disk directly; it goes through a FileSystem so
tests (and embedding hosts) can substitute their own implementation.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Protocol

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    def create_directory_recursive(self, path: Path) -> bool: ...

    def open_for_truncated_write(self, path: Path) -> BinaryIO:
        """Return a binary handle, or raise OSError."""
        ...

    def relative_path(self, base: Path, target: Path) -> str: ...

    def list_subdirectories(self, path: Path) -> list[str]: ...

    def read_text(self, path: Path) -> str: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def create_directory_recursive(self, path: Path) -> bool:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.debug("mkdir -p %s failed: %s", path, exc)
            return False
        return True

    def open_for_truncated_write(self, path: Path) -> BinaryIO:
        # Binary mode: newline translation is done by the templates, not the OS
        return open(path, "wb")

    def relative_path(self, base: Path, target: Path) -> str:
        rel = os.path.relpath(os.path.abspath(target), os.path.abspath(base))
        return Path(rel).as_posix()

    def list_subdirectories(self, path: Path) -> list[str]:
        try:
            names = [p.name for p in Path(path).iterdir() if p.is_dir()]
        except OSError:
            return []
        return sorted(names, key=str.lower)

    def read_text(self, path: Path) -> str:
        return Path(path).read_bytes().decode("utf-8", errors="replace")
