"""Status-flag eligibility rules."""

from __future__ import annotations

from classifier_engine.config import USPSA, RatingScheme
from classifier_engine.schema import ScoreRecord


def is_eligible(record: ScoreRecord, scheme: RatingScheme = USPSA) -> bool:
    """Return False only for results whose flag is in the scheme's exclusion set."""

    if record.status_flag is None:
        return True
    return record.status_flag not in scheme.excluded_flags
