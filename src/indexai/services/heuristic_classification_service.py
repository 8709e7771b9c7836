from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from pathlib import Path

from indexai.domain.extensions import classify_extension, extension_of
from indexai.domain.models import DEFAULT_CATEGORY, Classification, DirectoryEntry
from indexai.domain.search_context import (
    DEFAULT_KEYWORD_SETS,
    KeywordSets,
    categorize_context,
)
from indexai.services.context_service import ContextService
from indexai.services.folder_scan_service import FolderScanService

logger = logging.getLogger(__name__)


class HeuristicClassificationService:
    def __init__(
        self,
        folder_scan: FolderScanService,
        context: ContextService,
        extension_table: Mapping[str, str],
        keyword_sets: KeywordSets = DEFAULT_KEYWORD_SETS,
        search_delay: float = 1.2,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._folder_scan = folder_scan
        self._context = context
        self._extension_table = extension_table
        self._keyword_sets = keyword_sets
        self._search_delay = search_delay
        self._sleep = sleep

    def classify(self, base_path: Path, entry: DirectoryEntry) -> Classification:
        if entry.is_dir:
            classification = self._folder_scan.scan_folder(base_path / entry.name)
        else:
            label, found = classify_extension(
                extension_of(entry.name), self._extension_table
            )
            classification = Classification(label=label, resolved=found)
        if classification.resolved:
            return classification
        return self._classify_from_search(entry.name)

    def _classify_from_search(self, name: str) -> Classification:
        self._sleep(self._search_delay)
        title = self._context.search_context(name)
        label = categorize_context(title, self._keyword_sets)
        logger.debug("Search title %r for %r -> %s", title, name, label)
        return Classification(
            label=label, resolved=label != DEFAULT_CATEGORY, searched=True
        )
