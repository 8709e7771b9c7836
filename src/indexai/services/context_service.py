from __future__ import annotations

import logging

from indexai.domain.models import BatchPlan
from indexai.domain.plan_parsing import parse_batch_plan
from indexai.ports.llm_port import LLMPort
from indexai.ports.search_port import SearchPort

logger = logging.getLogger(__name__)


class ContextService:
    """Short descriptive context about an item from the search surface or the model."""

    def __init__(self, search: SearchPort, llm: LLMPort) -> None:
        self._search = search
        self._llm = llm

    def search_context(self, query: str) -> str:
        return self._search.search_title(query)

    def query_language_model(self, prompt: str) -> str:
        return self._llm.generate_text(prompt)

    def request_plan(self, prompt: str) -> BatchPlan:
        """Raises LLMRequestError for transport failures and PlanParseError for bad replies."""

        text = self.query_language_model(prompt)
        plan = parse_batch_plan(text)
        logger.debug(
            "Model plan: %d moves, %d items flagged for search",
            len(plan.moves),
            len(plan.need_websearch),
        )
        return plan
