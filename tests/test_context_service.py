from unittest.mock import Mock

import pytest

from indexai.domain.errors import LLMRequestError, PlanParseError
from indexai.domain.models import Move
from indexai.services.context_service import ContextService


def test_search_context_delegates_to_search() -> None:
    search = Mock()
    search.search_title.return_value = "Portal 2 - Valve"
    service = ContextService(search, Mock())

    assert service.search_context("portal2") == "Portal 2 - Valve"
    search.search_title.assert_called_once_with("portal2")


def test_request_plan_extracts_json_from_reply() -> None:
    llm = Mock()
    llm.generate_text.return_value = (
        'Here is the plan:\n{"moves": [{"file": "a.mp3", "destination": "Audio"}]}\nDone.'
    )
    service = ContextService(Mock(), llm)

    plan = service.request_plan("prompt")

    assert plan.moves == [Move(source_name="a.mp3", destination="Audio")]
    assert plan.need_websearch == []
    llm.generate_text.assert_called_once_with("prompt")


def test_request_plan_propagates_transport_errors() -> None:
    llm = Mock()
    llm.generate_text.side_effect = LLMRequestError("no response")
    with pytest.raises(LLMRequestError):
        ContextService(Mock(), llm).request_plan("prompt")


def test_request_plan_raises_on_unparseable_reply() -> None:
    llm = Mock()
    llm.generate_text.return_value = "{broken"
    # No closing brace: extraction yields an empty object, which is an empty plan.
    assert ContextService(Mock(), llm).request_plan("prompt").moves == []

    llm.generate_text.return_value = "{broken}"
    with pytest.raises(PlanParseError):
        ContextService(Mock(), llm).request_plan("prompt")
