from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from indexai.adapters.llm_gemini import GeminiLLMAdapter
from indexai.adapters.llm_mock import MockLLMAdapter
from indexai.adapters.local_filesystem import LocalFileSystemAdapter
from indexai.adapters.search_google import GoogleSearchAdapter
from indexai.domain.entries import own_executable_names
from indexai.domain.extensions import EXTENSION_CATEGORIES
from indexai.domain.search_context import (
    DEFAULT_KEYWORD_SETS,
    KeywordSets,
    load_keyword_sets,
)
from indexai.settings import (
    AI_ITEM_LIMIT,
    CONTEXT_KEYWORDS_PATH,
    EXCLUDED_NAMES,
    GEMINI_API_KEY,
    GEMINI_BASE_URL,
    GEMINI_MODEL,
    HTTP_TIMEOUT_SECONDS,
    SEARCH_DELAY_SECONDS,
    SEARCH_TITLE_SUFFIX,
    SEARCH_URL,
    SEARCH_USER_AGENT,
)
from indexai.services.context_service import ContextService
from indexai.services.folder_scan_service import FolderScanService
from indexai.services.heuristic_classification_service import (
    HeuristicClassificationService,
)
from indexai.services.organize_service import OrganizeService
from indexai.services.relocation_service import RelocationService

logger = logging.getLogger(__name__)


def build_services(api_key: str | None = None) -> dict[str, Any]:
    filesystem = LocalFileSystemAdapter()
    search = GoogleSearchAdapter(
        search_url=SEARCH_URL,
        user_agent=SEARCH_USER_AGENT,
        title_suffix=SEARCH_TITLE_SUFFIX,
        timeout=HTTP_TIMEOUT_SECONDS,
    )
    key = api_key if api_key is not None else GEMINI_API_KEY
    llm = MockLLMAdapter()
    if key:
        llm = GeminiLLMAdapter(
            api_key=key,
            model=GEMINI_MODEL,
            base_url=GEMINI_BASE_URL,
            timeout=HTTP_TIMEOUT_SECONDS,
        )
    context_service = ContextService(search, llm)
    folder_scan_service = FolderScanService(filesystem)
    classification_service = HeuristicClassificationService(
        folder_scan_service,
        context_service,
        extension_table=EXTENSION_CATEGORIES,
        keyword_sets=load_configured_keyword_sets(CONTEXT_KEYWORDS_PATH),
        search_delay=SEARCH_DELAY_SECONDS,
    )
    relocation_service = RelocationService(filesystem)
    return {
        "context_service": context_service,
        "folder_scan_service": folder_scan_service,
        "classification_service": classification_service,
        "relocation_service": relocation_service,
        "organize_service": OrganizeService(
            filesystem,
            classification_service,
            context_service,
            relocation_service,
            excluded_names=own_executable_names(sys.argv[0], EXCLUDED_NAMES),
            ai_item_limit=AI_ITEM_LIMIT,
        ),
    }


def load_configured_keyword_sets(path: str) -> KeywordSets:
    if not path:
        return DEFAULT_KEYWORD_SETS
    try:
        return load_keyword_sets(Path(path))
    except (OSError, ValueError) as exc:
        logger.warning("Using built-in keyword sets; could not load %s: %s", path, exc)
        return DEFAULT_KEYWORD_SETS
