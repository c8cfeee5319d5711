"""Canonical chronological ordering of results."""

from __future__ import annotations

from typing import Iterable

from classifier_engine.schema import ScoreRecord


def sort_key(record: ScoreRecord) -> tuple:
    return (record.occurred_on, record.score)


def sort_scores(records: Iterable[ScoreRecord]) -> list[ScoreRecord]:
    """Sort by date, then by ascending score; equal records keep input order."""

    return sorted(records, key=sort_key)
