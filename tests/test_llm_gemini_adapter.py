import pytest
import requests

from indexai.adapters import llm_gemini
from indexai.adapters.llm_gemini import GeminiLLMAdapter
from indexai.adapters.llm_mock import MockLLMAdapter
from indexai.domain.errors import LLMRequestError


class _FakeResponse:
    def __init__(self, status_code: int, payload=None, reason: str = "OK") -> None:
        self.status_code = status_code
        self._payload = payload
        self.reason = reason

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def _adapter(api_key: str = "test-key") -> GeminiLLMAdapter:
    return GeminiLLMAdapter(
        api_key=api_key,
        model="gemini-test",
        base_url="https://example.com/v1beta/",
        timeout=5,
    )


def test_generate_text_posts_prompt_and_returns_first_part(monkeypatch) -> None:
    captured: dict[str, object] = {}

    def _fake_post(url, params, headers, json, timeout):
        captured.update(url=url, params=params, json=json, timeout=timeout)
        return _FakeResponse(
            200,
            {
                "candidates": [
                    {"content": {"parts": [{"text": "first"}, {"text": "second"}]}},
                    {"content": {"parts": [{"text": "other"}]}},
                ]
            },
        )

    monkeypatch.setattr(llm_gemini.requests, "post", _fake_post)

    assert _adapter().generate_text("Sort these") == "first"
    assert captured["url"] == "https://example.com/v1beta/models/gemini-test:generateContent"
    assert captured["params"] == {"key": "test-key"}
    assert captured["json"] == {"contents": [{"parts": [{"text": "Sort these"}]}]}
    assert captured["timeout"] == 5


def test_generate_text_without_candidates_raises(monkeypatch) -> None:
    monkeypatch.setattr(
        llm_gemini.requests, "post", lambda *args, **kwargs: _FakeResponse(200, {})
    )
    with pytest.raises(LLMRequestError, match="no response"):
        _adapter().generate_text("x")


def test_generate_text_transport_failure_raises(monkeypatch) -> None:
    def _boom(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(llm_gemini.requests, "post", _boom)
    with pytest.raises(LLMRequestError, match="offline"):
        _adapter().generate_text("x")


def test_generate_text_http_error_reports_service_message(monkeypatch) -> None:
    monkeypatch.setattr(
        llm_gemini.requests,
        "post",
        lambda *args, **kwargs: _FakeResponse(
            400, {"error": {"message": "API key not valid"}}, reason="Bad Request"
        ),
    )
    with pytest.raises(LLMRequestError, match="400: API key not valid"):
        _adapter().generate_text("x")


def test_generate_text_non_json_body_raises(monkeypatch) -> None:
    monkeypatch.setattr(
        llm_gemini.requests, "post", lambda *args, **kwargs: _FakeResponse(200, None)
    )
    with pytest.raises(LLMRequestError):
        _adapter().generate_text("x")


def test_missing_key_raises_without_request(monkeypatch) -> None:
    def _unexpected(*args, **kwargs):
        raise AssertionError("no request expected")

    monkeypatch.setattr(llm_gemini.requests, "post", _unexpected)
    with pytest.raises(LLMRequestError, match="not configured"):
        _adapter(api_key="").generate_text("x")


def test_mock_adapter_always_fails() -> None:
    with pytest.raises(LLMRequestError, match="not configured"):
        MockLLMAdapter().generate_text("x")


def test_transport_error_message_hides_api_key(monkeypatch) -> None:
    def _boom(*args, **kwargs):
        raise requests.ConnectionError(
            "HTTPSConnectionPool(host='example.com'): Max retries exceeded with url: "
            "/v1beta/models/gemini-test:generateContent?key=test-key"
        )

    monkeypatch.setattr(llm_gemini.requests, "post", _boom)
    with pytest.raises(LLMRequestError) as excinfo:
        _adapter().generate_text("x")
    assert "test-key" not in str(excinfo.value)
    assert "key=***" in str(excinfo.value)
