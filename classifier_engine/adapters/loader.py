"""Pick an adapter by file suffix."""

from __future__ import annotations

from pathlib import Path

from classifier_engine.adapters import csv_adapter, json_adapter, text_adapter
from classifier_engine.schema import ScoreRecord

_ADAPTERS = {
    ".csv": csv_adapter.parse,
    ".json": json_adapter.parse,
    ".txt": text_adapter.parse,
    ".tsv": text_adapter.parse,
}


def load_records(path) -> list[ScoreRecord]:
    """Load score records from a .csv, .json, .txt or .tsv file."""

    suffix = Path(path).suffix.lower()
    adapter = _ADAPTERS.get(suffix)
    if adapter is None:
        raise ValueError("Unsupported input format, expected .csv, .json, .txt or .tsv")
    return adapter(str(path))
