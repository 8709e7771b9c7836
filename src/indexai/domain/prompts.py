from __future__ import annotations

import json
from collections.abc import Sequence

_PLAN_SHAPE = (
    '{"moves": [{"file": "item_name", "destination": "CategoryFolder"}], '
    '"need_websearch": ["cryptic_name"]}'
)


def build_batch_prompt(items: Sequence[str]) -> str:
    return (
        "Organize these messy files and folders into clean category folders.\n"
        f"Items: {', '.join(items)}.\n\n"
        "Rules:\n"
        "1. Group files and folders by context "
        "(e.g., 'Trip_Photos' folder -> 'Images' category).\n"
        "2. Do NOT move a folder into itself.\n"
        "3. If an item name is cryptic, mark it for web search.\n\n"
        "Return ONLY raw JSON in this format:\n"
        f"{_PLAN_SHAPE}"
    )


def build_followup_prompt(item: str, search_title: str, items: Sequence[str]) -> str:
    shape = json.dumps(
        {"moves": [{"file": item, "destination": "folder"}], "need_websearch": []}
    )
    return (
        f'I have an item named "{item}".\n'
        f'Google search result says: "{search_title}".\n'
        f"The full list of items was: {', '.join(items)}.\n"
        "Based on this, which category folder from the previous list should it go to?\n"
        f"Return ONLY raw JSON: {shape}"
    )
