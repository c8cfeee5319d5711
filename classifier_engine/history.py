"""Replay of a full result set into a rating time series."""

from __future__ import annotations

import logging
from typing import Iterable

from classifier_engine.config import USPSA, RatingScheme
from classifier_engine.eligibility import is_eligible
from classifier_engine.ordering import sort_scores
from classifier_engine.schema import ClassificationSnapshot, ScoreRecord
from classifier_engine.window import RollingWindow

logger = logging.getLogger(__name__)


def _eligible_in_order(records: Iterable[ScoreRecord], scheme: RatingScheme) -> list[ScoreRecord]:
    ordered = sort_scores(records)
    eligible = [record for record in ordered if is_eligible(record, scheme)]
    skipped = len(ordered) - len(eligible)
    if skipped:
        logger.debug("Skipped %d ineligible results out of %d", skipped, len(ordered))
    return eligible


def get_classification_history(
    records: Iterable[ScoreRecord], scheme: RatingScheme = USPSA
) -> list[ClassificationSnapshot]:
    """Replay every eligible result and record the rating after each scorable append."""

    window = RollingWindow(scheme=scheme)
    snapshots: list[ClassificationSnapshot] = []
    for record in _eligible_in_order(records, scheme):
        window = window.append(record)
        if window.can_score:
            snapshots.append(ClassificationSnapshot(record.occurred_on, window.rating_percentage()))
    return snapshots


def get_current_window(records: Iterable[ScoreRecord], scheme: RatingScheme = USPSA) -> RollingWindow:
    """Return the window left after replaying all eligible results."""

    window = RollingWindow(scheme=scheme)
    for record in _eligible_in_order(records, scheme):
        window = window.append(record)
    return window
