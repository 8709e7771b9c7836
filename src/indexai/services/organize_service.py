from __future__ import annotations

import logging
from collections.abc import Callable, Collection
from pathlib import Path

from indexai.domain.entries import is_eligible
from indexai.domain.errors import LLMRequestError, PlanParseError
from indexai.domain.models import (
    DEFAULT_CATEGORY,
    DirectoryEntry,
    Move,
    RunResult,
)
from indexai.domain.prompts import build_batch_prompt, build_followup_prompt
from indexai.ports.filesystem_port import FileSystemPort
from indexai.services.context_service import ContextService
from indexai.services.heuristic_classification_service import (
    HeuristicClassificationService,
)
from indexai.services.relocation_service import RelocationService

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


class OrganizeService:
    """
    Runs one organize pass over the top-level entries of a directory.

    Two modes share the same listing, exclusions and relocation step:
    the heuristic mode classifies each entry through the fallback chain
    (folder scan, extension table, web search) and the AI mode asks the model
    for one plan covering every entry, then resolves flagged items with a
    search plus a follow-up prompt each. Both return exactly one RunResult.
    """

    def __init__(
        self,
        filesystem: FileSystemPort,
        classifier: HeuristicClassificationService,
        context: ContextService,
        relocation: RelocationService,
        excluded_names: Collection[str] = frozenset(),
        ai_item_limit: int = 30,
    ) -> None:
        self._filesystem = filesystem
        self._classifier = classifier
        self._context = context
        self._relocation = relocation
        self._excluded_names = frozenset(excluded_names)
        self._ai_item_limit = ai_item_limit

    def run(
        self,
        target: Path | str,
        use_ai: bool = False,
        progress_callback: ProgressCallback | None = None,
    ) -> RunResult:
        base_path = Path(target)
        self._emit_progress(progress_callback, f"Scanning {base_path}")
        try:
            entries = self._list_eligible_entries(base_path)
        except OSError as exc:
            logger.error("Could not read %s: %s", base_path, exc)
            return RunResult.failure(f"Error reading dir: {exc}")
        if use_ai:
            return self._run_batch(base_path, entries, progress_callback)
        return self._run_heuristic(base_path, entries, progress_callback)

    def _list_eligible_entries(self, base_path: Path) -> list[DirectoryEntry]:
        return [
            entry
            for entry in self._filesystem.list_entries(base_path)
            if is_eligible(entry.name, self._excluded_names)
        ]

    def _run_heuristic(
        self,
        base_path: Path,
        entries: list[DirectoryEntry],
        progress_callback: ProgressCallback | None,
    ) -> RunResult:
        moved = 0
        searched = 0
        for entry in entries:
            self._emit_progress(progress_callback, f"Classifying {entry.name}")
            classification = self._classifier.classify(base_path, entry)
            if classification.searched:
                searched += 1
            if classification.label == DEFAULT_CATEGORY:
                logger.info("Leaving %s in place (no category)", entry.name)
                continue
            if self._perform_move(
                base_path, Move(entry.name, classification.label), progress_callback
            ):
                moved += 1
        return RunResult.success(
            f"Normal Scan Complete. Organized {moved} items. "
            f"Performed {searched} web searches.",
            moved=moved,
            searched=searched,
        )

    def _run_batch(
        self,
        base_path: Path,
        entries: list[DirectoryEntry],
        progress_callback: ProgressCallback | None,
    ) -> RunResult:
        items = [entry.name for entry in entries]
        if len(items) > self._ai_item_limit:
            return RunResult.failure(
                f"Too many items ({len(items)}). Limit is {self._ai_item_limit}. "
                "Try again in normal mode."
            )
        if not items:
            return RunResult.failure("No items found to organize.")

        self._emit_progress(progress_callback, f"Asking the model to plan {len(items)} items")
        try:
            plan = self._context.request_plan(build_batch_prompt(items))
        except LLMRequestError as exc:
            logger.error("Plan request failed: %s", exc)
            return RunResult.failure(f"AI API Error: {exc}")
        except PlanParseError as exc:
            logger.error("Plan response unreadable: %s", exc)
            return RunResult.failure("Failed to parse AI response")

        allowed = set(items)
        moved = self._apply_moves(base_path, plan.moves, allowed, progress_callback)
        searched = 0
        skipped = 0
        for name in plan.need_websearch:
            if name not in allowed:
                logger.warning("Ignoring search request for unknown item %r", name)
                continue
            self._emit_progress(progress_callback, f"Looking up {name}")
            title = self._context.search_context(name)
            searched += 1
            try:
                followup = self._context.request_plan(
                    build_followup_prompt(name, title, items)
                )
            except (LLMRequestError, PlanParseError) as exc:
                logger.warning("Skipping follow-up for %s: %s", name, exc)
                skipped += 1
                continue
            moved += self._apply_moves(base_path, followup.moves, allowed, progress_callback)

        message = (
            f"AI Organization Complete. Organized {moved} items. "
            f"Performed {searched} web searches."
        )
        if skipped:
            message += f" Skipped {skipped} web-search follow-ups."
        return RunResult.success(message, moved=moved, searched=searched, skipped=skipped)

    def _apply_moves(
        self,
        base_path: Path,
        moves: list[Move],
        allowed: set[str],
        progress_callback: ProgressCallback | None,
    ) -> int:
        moved = 0
        for move in moves:
            if move.source_name not in allowed:
                logger.warning("Ignoring move for unlisted item %r", move.source_name)
                continue
            if self._perform_move(base_path, move, progress_callback):
                moved += 1
        return moved

    def _perform_move(
        self,
        base_path: Path,
        move: Move,
        progress_callback: ProgressCallback | None,
    ) -> bool:
        self._emit_progress(
            progress_callback, f"Moving {move.source_name} -> {move.destination}"
        )
        try:
            self._relocation.move(base_path, move.source_name, move.destination)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to move %s: %s", move.source_name, exc)
            self._emit_progress(
                progress_callback, f"Failed to move {move.source_name}: {exc}"
            )
            return False
        return True

    @staticmethod
    def _emit_progress(callback: ProgressCallback | None, message: str) -> None:
        if callback is None:
            return
        callback(message)
