import json
from datetime import date

import pytest

from classifier_engine.adapters.csv_adapter import parse as parse_csv
from classifier_engine.adapters.json_adapter import parse as parse_json
from classifier_engine.adapters.loader import load_records
from classifier_engine.adapters.text_adapter import parse_line, parse_text
from classifier_engine.schema import ScoreRecord


def test_parse_classifier_row():
    line = "6/01/25 \t09-10 \tCuster Sportsmens Club \tY \t95.0488 \t11.2840 \t6/10/25 \tStage Score"
    assert parse_line(line) == ScoreRecord(
        occurred_on=date(2025, 6, 1),
        score=95.0488,
        event_key="09-10",
        origin="Custer Sportsmens Club",
        status_flag="Y",
        raw_rate=11.284,
    )


def test_parse_major_match_row():
    line = (
        "6/26/24 \t\t2024 SIG Sauer Carry Optics Nationals Presented by Vortex Optics at US01 "
        "\tF \t90.8692 \t- \t- \tMajor Match"
    )
    record = parse_line(line)
    assert record == ScoreRecord(
        occurred_on=date(2024, 6, 26),
        score=90.8692,
        origin="2024 SIG Sauer Carry Optics Nationals Presented by Vortex Optics at US01",
        status_flag="F",
    )
    assert record.event_key is None
    assert record.raw_rate is None


def test_parse_four_digit_year():
    record = parse_line("3/03/2024 \t23-01 \tSome Club \tY \t100.0000 \t10.3250")
    assert record.occurred_on == date(2024, 3, 3)


def test_parse_text_ignores_headers(classifier_record):
    assert len(classifier_record) == 21
    assert classifier_record[0].event_key == "09-10"
    assert classifier_record[-1].occurred_on == date(2023, 5, 7)
    assert parse_text("Date Number Club\n\n   \n") == []


def test_parse_line_rejects_bad_date():
    assert parse_line("13/45/24 \t23-01 \tSome Club \tY \t100.0000 \t10.3250") is None


def test_csv_parse_success(tmp_path):
    path = tmp_path / "scores.csv"
    path.write_text(
        "occurred_on,score,event_key,origin,status_flag,raw_rate\n"
        "2024-03-03,92.7446,99-28,Custer Sportsmens Club,Y,10.087\n"
        "2024-06-26,90.8692,,Nationals,F,\n",
        encoding="utf-8",
    )
    records = parse_csv(str(path))
    assert len(records) == 2
    assert records[0].raw_rate == pytest.approx(10.087)
    assert records[1].event_key is None
    assert records[1].raw_rate is None


def test_csv_parse_invalid_row(tmp_path):
    path = tmp_path / "scores.csv"
    path.write_text("occurred_on,score\n2024-03-03,fast\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_json_parse_success(tmp_path):
    path = tmp_path / "scores.json"
    payload = [
        {"occurred_on": "2024-03-03", "score": 92.7446, "event_key": "99-28", "status_flag": "Y"},
        {"occurred_on": "2024-06-26", "score": 90.8692},
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    records = parse_json(str(path))
    assert len(records) == 2
    assert records[1].status_flag is None


def test_json_parse_malformed(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps([{"occurred_on": "bad", "score": 90}]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_load_records_dispatches_by_suffix(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps([{"occurred_on": "2024-03-03", "score": 80}]), encoding="utf-8")
    assert len(load_records(path)) == 1
    with pytest.raises(ValueError):
        load_records(tmp_path / "scores.xlsx")
