from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LLMPort(Protocol):
    def generate_text(self, prompt: str) -> str:
        """Return the first candidate's text for a prompt; raise LLMRequestError on failure."""
