from datetime import date

from classifier_engine.eligibility import is_eligible
from classifier_engine.ordering import sort_scores
from classifier_engine.schema import ScoreRecord


def test_sort_by_date_then_percentage():
    records = [
        ScoreRecord(date(2024, 1, 1), 55, event_key="01-01"),
        ScoreRecord(date(2024, 2, 2), 58, event_key="02-01"),
        ScoreRecord(date(2024, 1, 1), 34, event_key="01-05"),
        ScoreRecord(date(2024, 1, 1), 90, event_key="08-09"),
        ScoreRecord(date(2024, 2, 2), 80, event_key="07-05"),
    ]
    result = sort_scores(records)
    assert [r.event_key for r in result] == ["01-05", "01-01", "08-09", "02-01", "07-05"]


def test_sort_is_stable_for_full_ties():
    first = ScoreRecord(date(2024, 1, 1), 70, event_key="a")
    second = ScoreRecord(date(2024, 1, 1), 70, event_key="b")
    assert sort_scores([first, second]) == [first, second]
    assert sort_scores([second, first]) == [second, first]


def test_eligibility_flags():
    day = date(2024, 1, 1)
    assert is_eligible(ScoreRecord(day, 80))
    for flag in ("Y", "F", "E", "P", "U", "I"):
        assert is_eligible(ScoreRecord(day, 80, status_flag=flag))
    for flag in ("A", "D", "G"):
        assert not is_eligible(ScoreRecord(day, 80, status_flag=flag))
