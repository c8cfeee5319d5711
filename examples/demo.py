"""Demo script for classifier-engine."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from classifier_engine.adapters.text_adapter import parse
from classifier_engine.classes import class_info
from classifier_engine.history import get_classification_history
from classifier_engine.target import score_needed


def main() -> None:
    records = parse("examples/sample_record.txt")
    history = get_classification_history(records)
    for snapshot in history:
        print(f"{snapshot.date.isoformat()}  {snapshot.percentage:.4f}")

    current = history[-1].percentage
    info = class_info(current)
    print("Current class:", info.current_class)
    print("Score needed for 90%:", score_needed(records, 90.0))


if __name__ == "__main__":
    main()
