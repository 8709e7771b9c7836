from __future__ import annotations

from indexai.domain.errors import LLMRequestError
from indexai.ports.llm_port import LLMPort


class MockLLMAdapter(LLMPort):
    def generate_text(self, prompt: str) -> str:
        _ = prompt
        raise LLMRequestError("LLM not configured. Set GEMINI_API_KEY or pass --api-key.")
