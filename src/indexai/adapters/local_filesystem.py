from __future__ import annotations

import os
from pathlib import Path

from indexai.domain.models import DirectoryEntry, EntryKind
from indexai.ports.filesystem_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    def list_entries(self, path: Path) -> list[DirectoryEntry]:
        entries: list[DirectoryEntry] = []
        with os.scandir(path) as it:
            for item in it:
                kind = EntryKind.DIRECTORY if item.is_dir() else EntryKind.FILE
                entries.append(DirectoryEntry(name=item.name, kind=kind))
        return entries

    def list_child_names(self, path: Path) -> list[str]:
        with os.scandir(path) as it:
            return [item.name for item in it]

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def make_dir(self, path: Path) -> None:
        Path(path).mkdir(exist_ok=True)

    def rename(self, source: Path, destination: Path) -> None:
        os.rename(source, destination)
