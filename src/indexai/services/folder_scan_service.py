from __future__ import annotations

import logging
from pathlib import Path

from indexai.domain.folder_signature import decide_folder_category, score_folder
from indexai.domain.models import DEFAULT_CATEGORY, Classification
from indexai.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


class FolderScanService:
    def __init__(self, filesystem: FileSystemPort) -> None:
        self._filesystem = filesystem

    def scan_folder(self, path: Path) -> Classification:
        try:
            child_names = self._filesystem.list_child_names(path)
        except OSError as exc:
            logger.warning("Could not read folder %s: %s", path, exc)
            return Classification(label=DEFAULT_CATEGORY, resolved=False)
        signature = score_folder(child_names)
        classification = decide_folder_category(signature)
        logger.debug(
            "Folder %s scored game=%d software=%d -> %s",
            path,
            signature.game_score,
            signature.software_score,
            classification.label,
        )
        return classification
