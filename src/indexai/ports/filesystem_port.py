from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from indexai.domain.models import DirectoryEntry


@runtime_checkable
class FileSystemPort(Protocol):
    def list_entries(self, path: Path) -> list[DirectoryEntry]:
        """Return the immediate entries of a directory in listing order."""

    def list_child_names(self, path: Path) -> list[str]:
        """Return the names of a directory's immediate children."""

    def exists(self, path: Path) -> bool:
        """Return True when anything exists at the path."""

    def make_dir(self, path: Path) -> None:
        """Create a directory if it does not exist yet."""

    def rename(self, source: Path, destination: Path) -> None:
        """Move an entry with a single rename call."""
