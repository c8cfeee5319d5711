"""Bounded rolling window of classifier results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from classifier_engine.config import USPSA, RatingScheme
from classifier_engine.schema import ScoreRecord


@dataclass(frozen=True)
class RollingWindow:
    """Immutable window of the most recent results.

    Appending never mutates the window; it returns a new one, so windows captured
    during a replay stay valid. Entries keep insertion order, which callers are
    expected to have sorted with ``ordering.sort_scores`` beforehand.
    """

    scores: tuple[ScoreRecord, ...] = ()
    scheme: RatingScheme = USPSA

    def __post_init__(self) -> None:
        object.__setattr__(self, "scores", tuple(self.scores))

    @property
    def can_score(self) -> bool:
        return len(self.scores) >= self.scheme.min_scores

    def __len__(self) -> int:
        return len(self.scores)

    def __iter__(self) -> Iterator[ScoreRecord]:
        return iter(self.scores)

    def keys(self) -> list[str]:
        """Event keys currently held, in window order."""

        return [record.event_key for record in self.scores if record.event_key is not None]

    def append(self, record: ScoreRecord) -> RollingWindow:
        """Return a new window with ``record`` added.

        A result for an event key already in the window replaces the older one
        wherever it sits. When the window is full the entry in the first slot
        is evicted.
        """

        history = list(self.scores)
        if record.event_key is not None:
            history = [entry for entry in history if entry.event_key != record.event_key]
        if len(history) == self.scheme.window_size:
            history = history[1:]

        history.append(record)
        return RollingWindow(tuple(history), self.scheme)

    def drop_count(self) -> int:
        """Number of lowest scores discarded before averaging."""

        if not self.can_score:
            return 0
        return min(self.scheme.max_dropped, len(self.scores) - self.scheme.min_scores)

    def rating_percentage(self) -> Optional[float]:
        """Trimmed mean of the window, or None below the scoring floor."""

        if not self.can_score:
            return None

        values = np.sort(np.asarray([record.score for record in self.scores], dtype=float))
        return float(np.mean(values[self.drop_count():]))
