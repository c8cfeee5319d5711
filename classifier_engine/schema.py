"""Core data schema for classifier results."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ScoreRecord:
    """Scored classifier result used by all modules."""

    occurred_on: date
    score: float
    event_key: Optional[str] = None
    origin: Optional[str] = None
    status_flag: Optional[str] = None
    raw_rate: Optional[float] = None


@dataclass(frozen=True)
class ClassificationSnapshot:
    """Rating captured at the moment a result was absorbed."""

    date: date
    percentage: float
