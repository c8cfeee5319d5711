"""JSON adapter for classifier results."""

from __future__ import annotations

import json
import math
from datetime import date

from classifier_engine.schema import ScoreRecord

_REQUIRED_FIELDS = ("occurred_on", "score")


def _optional_text(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_item(item: dict, index: int) -> ScoreRecord:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if item.get(field) in (None, "")]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        occurred_on = date.fromisoformat(str(item["occurred_on"]).strip())
    except ValueError as exc:
        raise ValueError(f"Item {index}: malformed occurred_on") from exc

    if isinstance(item["score"], bool):
        raise ValueError(f"Item {index}: invalid score")
    try:
        score = float(item["score"])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: invalid score") from exc
    if not math.isfinite(score):
        raise ValueError(f"Item {index}: score must be finite")

    raw_rate = None
    if item.get("raw_rate") is not None:
        try:
            raw_rate = float(item["raw_rate"])
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Item {index}: invalid raw_rate") from exc

    return ScoreRecord(
        occurred_on=occurred_on,
        score=score,
        event_key=_optional_text(item.get("event_key")),
        origin=_optional_text(item.get("origin")),
        status_flag=_optional_text(item.get("status_flag")),
        raw_rate=raw_rate,
    )


def parse(file_path: str) -> list[ScoreRecord]:
    """Parse JSON file into score records."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
