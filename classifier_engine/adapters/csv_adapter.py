"""CSV adapter for classifier results."""

from __future__ import annotations

import csv
import math
from datetime import date

from classifier_engine.schema import ScoreRecord

_REQUIRED_FIELDS = ("occurred_on", "score")


def _optional_text(value) -> str | None:
    text = value.strip() if value else ""
    return text or None


def _parse_row(row: dict, row_number: int) -> ScoreRecord:
    missing = [field for field in _REQUIRED_FIELDS if not row.get(field)]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        occurred_on = date.fromisoformat(row["occurred_on"].strip())
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed occurred_on") from exc

    try:
        score = float(row["score"])
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: invalid score") from exc
    if not math.isfinite(score):
        raise ValueError(f"Row {row_number}: score must be finite")

    raw_rate_text = _optional_text(row.get("raw_rate"))
    raw_rate = None
    if raw_rate_text is not None:
        try:
            raw_rate = float(raw_rate_text)
        except ValueError as exc:
            raise ValueError(f"Row {row_number}: invalid raw_rate") from exc

    return ScoreRecord(
        occurred_on=occurred_on,
        score=score,
        event_key=_optional_text(row.get("event_key")),
        origin=_optional_text(row.get("origin")),
        status_flag=_optional_text(row.get("status_flag")),
        raw_rate=raw_rate,
    )


def parse(file_path: str) -> list[ScoreRecord]:
    """Parse CSV file into a list of score records."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        records: list[ScoreRecord] = []
        for row_number, row in enumerate(reader, start=2):
            records.append(_parse_row(row, row_number))
        return records
