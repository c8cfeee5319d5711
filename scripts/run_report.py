"""Build a classification report from a classifier record file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from classifier_engine.adapters.loader import load_records
from classifier_engine.config import USPSA, load_scheme
from classifier_engine.report import build_report


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute classification history and next-score target")
    parser.add_argument("--data", required=True, help="Path to a .txt/.tsv record, .csv or .json results file")
    parser.add_argument("--target", type=float, default=None, help="Target rating (defaults to next class)")
    parser.add_argument("--replacing", default=None, help="Classifier number the next result will replace")
    parser.add_argument("--scheme", default=None, help="Optional JSON rating scheme override")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        scheme = load_scheme(args.scheme) if args.scheme else USPSA
        records = load_records(Path(args.data))
    except ValueError as exc:
        parser.error(str(exc))

    report = build_report(records, target=args.target, replacing_key=args.replacing, scheme=scheme)

    print(json.dumps(report, indent=2))

    outputs_dir = Path("outputs")
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "classification_report.json"
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Saved classification report to {out_path}")


if __name__ == "__main__":
    main()
