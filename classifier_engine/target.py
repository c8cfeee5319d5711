"""Reverse solver for the score needed on the next classifier."""

from __future__ import annotations

from typing import Iterable, Optional

from classifier_engine.config import USPSA, RatingScheme
from classifier_engine.history import get_current_window
from classifier_engine.schema import ScoreRecord


def score_needed(
    records: Iterable[ScoreRecord],
    target_rating: float,
    replacing_key: Optional[str] = None,
    scheme: RatingScheme = USPSA,
) -> Optional[float]:
    """Minimum next score that lifts the rating to ``target_rating``.

    ``replacing_key`` names a classifier already in the window that the next
    result will replace. Returns None without enough history to rate, 0.0 when
    the target is already met, and otherwise the raw requirement, which may
    exceed ``scheme.score_cap``.
    """

    window = get_current_window(records, scheme)
    current = window.rating_percentage()
    if current is None:
        return None
    if current >= target_rating:
        return 0.0

    remaining = list(window.scores)
    if replacing_key is not None:
        remaining = [record for record in remaining if record.event_key != replacing_key]

    if len(remaining) == scheme.window_size:
        oldest = min(range(len(remaining)), key=lambda index: remaining[index].occurred_on)
        del remaining[oldest]

    kept = scheme.max_kept
    values = sorted(record.score for record in remaining)
    best = values[max(0, len(values) - (kept - 1)):]
    needed = target_rating * kept - sum(best)
    if needed <= 0:
        return 0.0
    return needed


def is_achievable(needed: Optional[float], scheme: RatingScheme = USPSA) -> Optional[bool]:
    """Whether a required score can be shot in a single classifier."""

    if needed is None:
        return None
    return needed <= scheme.score_cap
