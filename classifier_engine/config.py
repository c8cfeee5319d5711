"""Rating scheme configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RatingScheme:
    """Constants that define a rolling-window classification system."""

    window_size: int = 8
    min_scores: int = 4
    max_dropped: int = 2
    excluded_flags: frozenset[str] = field(default_factory=lambda: frozenset({"A", "D", "G"}))
    score_cap: float = 100.0
    class_bands: tuple[tuple[str, float], ...] = (
        ("GM", 95.0),
        ("M", 85.0),
        ("A", 75.0),
        ("B", 60.0),
        ("C", 40.0),
        ("D", 2.0),
    )
    unclassified: str = "U"

    @property
    def max_kept(self) -> int:
        """Largest number of scores that can count toward a rating."""

        return self.window_size - self.max_dropped

    @classmethod
    def from_dict(cls, payload: dict) -> RatingScheme:
        """Build a scheme from a plain mapping, falling back to defaults."""

        defaults = cls()
        try:
            window_size = int(payload.get("window_size", defaults.window_size))
            min_scores = int(payload.get("min_scores", defaults.min_scores))
            max_dropped = int(payload.get("max_dropped", defaults.max_dropped))
            score_cap = float(payload.get("score_cap", defaults.score_cap))
        except (TypeError, ValueError) as exc:
            raise ValueError("Scheme sizes must be numeric") from exc

        if min_scores < 1 or window_size < min_scores:
            raise ValueError(f"Invalid window: min_scores={min_scores}, window_size={window_size}")
        if max_dropped < 0 or window_size - max_dropped < min_scores:
            raise ValueError(f"Invalid max_dropped={max_dropped} for window_size={window_size}")

        flags = payload.get("excluded_flags")
        excluded_flags = defaults.excluded_flags if flags is None else frozenset(str(f) for f in flags)

        bands_raw = payload.get("class_bands")
        if bands_raw is None:
            class_bands = defaults.class_bands
        else:
            items = bands_raw.items() if isinstance(bands_raw, dict) else bands_raw
            try:
                pairs = [(str(label), float(threshold)) for label, threshold in items]
            except (TypeError, ValueError) as exc:
                raise ValueError("class_bands must map labels to numeric thresholds") from exc
            class_bands = tuple(sorted(pairs, key=lambda pair: pair[1], reverse=True))

        return cls(
            window_size=window_size,
            min_scores=min_scores,
            max_dropped=max_dropped,
            excluded_flags=excluded_flags,
            score_cap=score_cap,
            class_bands=class_bands,
            unclassified=str(payload.get("unclassified", defaults.unclassified)),
        )


USPSA = RatingScheme()


def load_scheme(file_path: str) -> RatingScheme:
    """Load a rating scheme override from a JSON file."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, dict):
        raise ValueError("Scheme JSON payload must be an object")

    return RatingScheme.from_dict(payload)
