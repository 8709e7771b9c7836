import json

from indexai.domain.prompts import build_batch_prompt, build_followup_prompt


def test_batch_prompt_lists_items_and_rules() -> None:
    prompt = build_batch_prompt(["Trip_Photos", "setup.exe"])
    assert "Items: Trip_Photos, setup.exe." in prompt
    assert "Do NOT move a folder into itself." in prompt
    assert "mark it for web search" in prompt
    assert '"need_websearch"' in prompt


def test_followup_prompt_embeds_item_title_and_shape() -> None:
    prompt = build_followup_prompt("xq9", "XQ9 shooter", ["a.jpg", "xq9"])
    assert 'I have an item named "xq9".' in prompt
    assert 'Google search result says: "XQ9 shooter".' in prompt
    assert "a.jpg, xq9" in prompt
    shape = prompt.split("Return ONLY raw JSON: ", 1)[1]
    assert json.loads(shape) == {
        "moves": [{"file": "xq9", "destination": "folder"}],
        "need_websearch": [],
    }
