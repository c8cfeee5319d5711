"""Adapter for classifier records copied from the USPSA website."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Optional

from classifier_engine.schema import ScoreRecord

logger = logging.getLogger(__name__)

_CLASSIFIER_ROW = re.compile(
    r"(?P<date>\d+/\d+/\d+)\s+(?P<event_key>\d{2}-\d{2})\s+(?P<origin>.+\S)\s+"
    r"(?P<flag>[A-Z])\s+(?P<percent>[\d.]+)\s+(?P<hit_factor>[\d.]+)"
)
_MAJOR_MATCH_ROW = re.compile(
    r"(?P<date>\d+/\d+/\d+)\s+(?P<origin>.+\S)\s+(?P<flag>[A-Z])\s+(?P<percent>[\d.]+)\s+-\s+-\s+Major Match$"
)


def _parse_date(raw: str) -> date:
    year = raw.rsplit("/", maxsplit=1)[-1]
    fmt = "%m/%d/%Y" if len(year) == 4 else "%m/%d/%y"
    return datetime.strptime(raw, fmt).date()


def parse_line(line: str) -> Optional[ScoreRecord]:
    """Parse one table row; headers and unrecognised lines yield None."""

    text = line.strip()
    match = _CLASSIFIER_ROW.search(text) or _MAJOR_MATCH_ROW.search(text)
    if match is None:
        return None

    groups = match.groupdict()
    try:
        occurred_on = _parse_date(groups["date"])
        percent = float(groups["percent"])
        hit_factor = float(groups["hit_factor"]) if groups.get("hit_factor") else None
    except ValueError:
        logger.debug("Ignoring malformed row: %r", text)
        return None

    return ScoreRecord(
        occurred_on=occurred_on,
        score=percent,
        event_key=groups.get("event_key"),
        origin=groups["origin"],
        status_flag=groups["flag"],
        raw_rate=hit_factor,
    )


def parse_text(text: str) -> list[ScoreRecord]:
    """Parse every recognisable row of a pasted classifier record."""

    records: list[ScoreRecord] = []
    for line in text.splitlines():
        record = parse_line(line)
        if record is not None:
            records.append(record)
    logger.debug("Parsed %d records from %d lines", len(records), len(text.splitlines()))
    return records


def parse(file_path: str) -> list[ScoreRecord]:
    """Parse a text file holding a pasted classifier record."""

    with open(file_path, encoding="utf-8") as handle:
        return parse_text(handle.read())
