"""Classification class bands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from classifier_engine.config import USPSA, RatingScheme


@dataclass(frozen=True)
class ClassInfo:
    current_class: str
    next_class: Optional[str]
    next_threshold: Optional[float]


def _bands_descending(scheme: RatingScheme) -> list[tuple[str, float]]:
    return sorted(scheme.class_bands, key=lambda band: band[1], reverse=True)


def class_for(percentage: float, scheme: RatingScheme = USPSA) -> str:
    """Return the class label a rating percentage falls into."""

    for label, threshold in _bands_descending(scheme):
        if percentage >= threshold:
            return label
    return scheme.unclassified


def class_info(percentage: float, scheme: RatingScheme = USPSA) -> ClassInfo:
    """Return the current class and the next class up with its threshold."""

    next_class = None
    next_threshold = None
    for label, threshold in _bands_descending(scheme):
        if percentage >= threshold:
            return ClassInfo(label, next_class, next_threshold)
        next_class, next_threshold = label, threshold
    return ClassInfo(scheme.unclassified, next_class, next_threshold)
