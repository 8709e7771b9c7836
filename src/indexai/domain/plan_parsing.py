from __future__ import annotations

import json

from .errors import PlanParseError
from .models import BatchPlan, Move

EMPTY_JSON = "{}"


def extract_json(text: str) -> str:
    """
    Cut the JSON object out of a model reply that may carry prose or code fences.

    Examples:
        >>> extract_json('Sure! {"moves":[]} thanks')
        '{"moves":[]}'
        >>> extract_json("no braces here")
        '{}'
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return EMPTY_JSON
    return text[start : end + 1]


def parse_batch_plan(text: str) -> BatchPlan:
    try:
        data = json.loads(extract_json(text))
    except json.JSONDecodeError as exc:
        raise PlanParseError(f"Invalid JSON in model response: {exc}") from exc
    if not isinstance(data, dict):
        raise PlanParseError("Model response is not a JSON object")

    moves: list[Move] = []
    raw_moves = data.get("moves") or []
    if not isinstance(raw_moves, list):
        raise PlanParseError("'moves' must be a list")
    for item in raw_moves:
        if not isinstance(item, dict):
            continue
        source = item.get("file")
        destination = item.get("destination")
        if not isinstance(source, str) or not isinstance(destination, str):
            continue
        source = source.strip()
        destination = destination.strip()
        if source and destination:
            moves.append(Move(source_name=source, destination=destination))

    raw_search = data.get("need_websearch") or []
    if not isinstance(raw_search, list):
        raise PlanParseError("'need_websearch' must be a list")
    need_websearch = [
        name.strip() for name in raw_search if isinstance(name, str) and name.strip()
    ]
    return BatchPlan(moves=moves, need_websearch=need_websearch)
