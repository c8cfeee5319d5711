"""Streamlit demo UI for classifier-engine."""

from __future__ import annotations

import tempfile
from collections import Counter
from pathlib import Path
from typing import Any

from classifier_engine.adapters import text_adapter
from classifier_engine.adapters.loader import load_records
from classifier_engine.config import USPSA
from classifier_engine.eligibility import is_eligible
from classifier_engine.report import build_report


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return load_records(temp_path)


def _build_summary(records: list) -> dict[str, Any]:
    flag_counts = Counter(record.status_flag or "-" for record in records)
    scores = [record.score for record in records]
    return {
        "total_results": len(records),
        "eligible_results": sum(1 for record in records if is_eligible(record)),
        "unique_classifiers": len({record.event_key for record in records if record.event_key}),
        "flag_counts": dict(sorted(flag_counts.items())),
        "best_score": max(scores) if scores else 0.0,
    }


def _fmt_pct(value) -> str:
    return "n/a" if value is None else f"{value:.2f}%"


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Classifier Engine Demo", layout="wide")
    st.title("Classifier Engine: Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload classifier record", type=["txt", "tsv", "csv", "json"])
        pasted = st.text_area("...or paste your classifier record", height=200)
        use_demo = st.checkbox("Load demo record", value=not pasted)
        use_next_class = st.checkbox("Target next class", value=True)
        target = st.number_input(
            "Target rating",
            min_value=0.0,
            max_value=USPSA.score_cap,
            value=85.0,
            step=0.5,
            disabled=use_next_class,
        )
        replacing = st.text_input("Replacing classifier (e.g. 99-24)", value="")
        run = st.button("Run engine", type="primary")

    if not run:
        st.info("Paste or upload a record in the sidebar and click **Run engine**.")
        return

    try:
        if pasted.strip():
            records = text_adapter.parse_text(pasted)
            data_source = "pasted record"
        elif uploaded is not None:
            records = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        elif use_demo:
            records = text_adapter.parse("examples/sample_record.txt")
            data_source = "demo record (examples/sample_record.txt)"
        else:
            st.error("Please paste or upload a record, or enable 'Load demo record'.")
            return

        if not records:
            st.error("No classifier results were found in the selected input.")
            return

        report = build_report(
            records,
            target=None if use_next_class else float(target),
            replacing_key=replacing.strip() or None,
        )

        st.success(f"Loaded {len(records)} results from {data_source}.")

        st.subheader("A) Data Summary")
        summary = _build_summary(records)
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Total results", summary["total_results"])
        c2.metric("Eligible results", summary["eligible_results"])
        c3.metric("Unique classifiers", summary["unique_classifiers"])
        c4.metric("Best score", _fmt_pct(summary["best_score"]))
        st.table([summary["flag_counts"]])

        st.subheader("B) Classification")
        r1, r2 = st.columns(2)
        r1.metric("Current average", _fmt_pct(report["current_rating"]))
        r2.metric("Current class", report["current_class"] or "not enough results")

        st.subheader("C) Next Classifier")
        needed = report["score_needed"]
        if report["current_rating"] is None:
            st.write(f"At least {USPSA.min_scores} eligible results are needed for a rating.")
        elif report["target"] is None:
            st.write("Congratulations! You've reached the top classification.")
        elif needed == 0:
            st.write(f"Target {_fmt_pct(report['target'])} is already reached.")
        elif report["achievable"]:
            st.write(f"To reach {_fmt_pct(report['target'])} you need {_fmt_pct(needed)} on your next classifier.")
        else:
            st.write(
                f"To reach {_fmt_pct(report['target'])} you need {_fmt_pct(needed)} "
                "on your next classifier (impossible in one match)."
            )

        st.subheader("D) History")
        if report["history"]:
            st.line_chart(
                {
                    "date": [point["date"] for point in report["history"]],
                    "rating": [point["percentage"] for point in report["history"]],
                },
                x="date",
                y="rating",
            )
        else:
            st.write("No rating history yet.")

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        st.error("Something went wrong while running the demo. Please verify the input format.")


if __name__ == "__main__":
    main()
