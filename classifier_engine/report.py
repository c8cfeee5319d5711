"""Presentation-neutral classification report."""

from __future__ import annotations

import logging
from typing import Any, Optional

from classifier_engine.classes import class_info
from classifier_engine.config import USPSA, RatingScheme
from classifier_engine.eligibility import is_eligible
from classifier_engine.history import get_classification_history
from classifier_engine.schema import ScoreRecord
from classifier_engine.target import is_achievable, score_needed

logger = logging.getLogger(__name__)


def build_report(
    records: list[ScoreRecord],
    target: Optional[float] = None,
    replacing_key: Optional[str] = None,
    scheme: RatingScheme = USPSA,
) -> dict[str, Any]:
    """Combine history, current class and next-score projection into one payload.

    Without an explicit ``target`` the threshold of the next class up is used.
    """

    history = get_classification_history(records, scheme)
    eligible = sum(1 for record in records if is_eligible(record, scheme))

    report: dict[str, Any] = {
        "total_records": len(records),
        "eligible_records": eligible,
        "history": [{"date": snap.date.isoformat(), "percentage": snap.percentage} for snap in history],
        "current_rating": None,
        "current_class": None,
        "next_class": None,
        "target": target,
        "score_needed": None,
        "achievable": None,
    }

    if not history:
        logger.info("No rating yet: %d eligible results, %d needed", eligible, scheme.min_scores)
        return report

    current = history[-1].percentage
    info = class_info(current, scheme)
    report["current_rating"] = current
    report["current_class"] = info.current_class
    report["next_class"] = info.next_class

    if target is None:
        target = info.next_threshold
        report["target"] = target
    if target is None:
        return report

    needed = score_needed(records, target, replacing_key=replacing_key, scheme=scheme)
    report["score_needed"] = needed
    report["achievable"] = is_achievable(needed, scheme)
    return report
