from __future__ import annotations

import logging
from pathlib import Path

from indexai.domain.relocation_logic import duplicate_name, validate_destination
from indexai.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


class RelocationService:
    def __init__(self, filesystem: FileSystemPort) -> None:
        self._filesystem = filesystem

    def move(self, base_path: Path, item_name: str, destination: str) -> Path:
        """
        Move base_path/item_name into base_path/destination and return the new path.

        Moving a folder onto its own category folder is a no-op. Existing entries are
        never overwritten: the moved item gets a duplicate suffix instead. Filesystem
        errors propagate unchanged.
        """
        category = validate_destination(destination)
        destination_dir = base_path / category
        source = base_path / item_name
        if source == destination_dir:
            return source
        if not self._filesystem.exists(source):
            raise FileNotFoundError(f"No such item: {source}")
        if not self._filesystem.exists(destination_dir):
            self._filesystem.make_dir(destination_dir)

        target = destination_dir / item_name
        if self._filesystem.exists(target):
            target = destination_dir / duplicate_name(
                item_name, lambda name: self._filesystem.exists(destination_dir / name)
            )
        self._filesystem.rename(source, target)
        logger.info("Moved %s -> %s", source, target)
        return target
