from __future__ import annotations

import logging

import requests

from indexai.domain.errors import LLMRequestError
from indexai.ports.llm_port import LLMPort

logger = logging.getLogger(__name__)


class GeminiLLMAdapter(LLMPort):
    def __init__(self, api_key: str, model: str, base_url: str, timeout: float = 30) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def generate_text(self, prompt: str) -> str:
        if not self._api_key:
            raise LLMRequestError("LLM not configured. Provide a Gemini API key.")
        payload = self._post_generate(prompt)
        return self._extract_candidate_text(payload)

    def _post_generate(self, prompt: str) -> dict:
        try:
            response = requests.post(
                f"{self._base_url}/models/{self._model}:generateContent",
                params={"key": self._api_key},
                headers={"Content-Type": "application/json"},
                json={"contents": [{"parts": [{"text": prompt}]}]},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise LLMRequestError(
                f"Request to Gemini failed: {self._redact(str(exc))}"
            ) from exc
        if response.status_code >= 400:
            raise LLMRequestError(
                f"Gemini API error {response.status_code}: "
                f"{self._redact(self._error_message(response))}"
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise LLMRequestError("Gemini returned a non-JSON body") from exc
        if not isinstance(payload, dict):
            raise LLMRequestError("Gemini returned an unexpected payload")
        return payload

    @staticmethod
    def _extract_candidate_text(payload: dict) -> str:
        candidates = payload.get("candidates") or []
        if not isinstance(candidates, list) or not candidates:
            raise LLMRequestError("no response")
        first = candidates[0] if isinstance(candidates[0], dict) else {}
        content = first.get("content") or {}
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
            raise LLMRequestError("no response")
        text = parts[0].get("text")
        if not isinstance(text, str):
            raise LLMRequestError("no response")
        logger.debug("Gemini returned %d characters", len(text))
        return text

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.reason or "unknown error"
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return response.reason or "unknown error"

    def _redact(self, text: str) -> str:
        if not self._api_key:
            return text
        return text.replace(self._api_key, "***")
