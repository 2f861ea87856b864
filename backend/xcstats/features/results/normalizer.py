"""
Row normalizer: raw sheet grid → validated RaceRecords.

Bad rows are dropped with a warning, never raised. The caller only
sees them as missing records.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Optional, Sequence

from xcstats.features.sheets.base import Grid
from xcstats.shared.constants import (
    MAX_DISTANCE_MI,
    MIN_DISTANCE_MI,
    RESULT_COLUMN_COUNT,
    SCHEDULE_COLUMN_COUNT,
    ResultColumn,
    ScheduleColumn,
)
from xcstats.shared.timing import (
    InvalidTimeFormat,
    calculate_3mi_equivalent,
    parse_time_to_seconds,
)

from .models import RaceRecord, ScheduledRace

logger = logging.getLogger(__name__)

# Formats Google Sheets hands back for a date or date-time cell
DATE_FORMATS = (
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%y",
    "%m/%d/%y %H:%M:%S",
    "%m/%d/%y %H:%M",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
)


class RowRejected(Exception):
    """Row cannot become a record. Handled inside this module only."""


def parse_number(value: Optional[str]) -> Optional[float]:
    """
    Parse a numeric cell, ignoring thousands separators.

    "2,181.69" → 2181.69, "" → None, "abc" → None
    """
    if value is None:
        return None
    text = str(value).replace(",", "").strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_date(value: str) -> date:
    """
    Parse a sheet date cell into a calendar date.

    Accepts ISO dates/datetimes and the usual US spreadsheet formats.

    Raises:
        ValueError: if no format matches
    """
    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"Unrecognized date: {value!r}")


def _pad(row: Sequence[Optional[str]], width: int) -> list[Optional[str]]:
    """Sheets API omits trailing empty cells."""
    cells = [None if c is None else str(c) for c in row[:width]]
    return cells + [None] * (width - len(cells))


def _resolve_seconds(seconds_cell: Optional[str], raw_time: str) -> float:
    seconds = parse_number(seconds_cell)
    if seconds is not None and seconds >= 0:
        return seconds
    try:
        return parse_time_to_seconds(raw_time)
    except InvalidTimeFormat:
        raise RowRejected(f"invalid time format {raw_time!r}")


def _resolve_distance(distance_cell: Optional[str]) -> float:
    distance = parse_number(distance_cell)
    if distance is None:
        raise RowRejected(f"invalid distance {distance_cell!r}")
    if distance < MIN_DISTANCE_MI or distance > MAX_DISTANCE_MI:
        raise RowRejected(f"distance out of range {distance_cell!r}")
    return distance


def normalize_row(row: Sequence[Optional[str]]) -> RaceRecord:
    """
    Convert one data row into a RaceRecord.

    Raises:
        RowRejected: with the reason the row was dropped
    """
    cells = _pad(row, RESULT_COLUMN_COUNT)
    runner = (cells[ResultColumn.RUNNER] or "").strip()
    race_date = (cells[ResultColumn.RACE_DATE] or "").strip()
    race_name = (cells[ResultColumn.RACE_NAME] or "").strip()
    raw_time = (cells[ResultColumn.TIME] or "").strip()

    if not runner or not race_date or not race_name or not raw_time:
        raise RowRejected("incomplete row")

    seconds = _resolve_seconds(cells[ResultColumn.SECONDS], raw_time)
    distance = _resolve_distance(cells[ResultColumn.DISTANCE])

    equiv = parse_number(cells[ResultColumn.EQUIV_3MI])
    if equiv is None:
        equiv = calculate_3mi_equivalent(seconds, distance)

    try:
        parsed_date = parse_date(race_date)
    except ValueError:
        raise RowRejected(f"invalid date {race_date!r}")

    return RaceRecord(
        runner=runner,
        race_date=parsed_date,
        race_name=race_name,
        raw_time=raw_time,
        distance_mi=distance,
        seconds=seconds,
        equiv_3mi_sec=equiv,
    )


def normalize_rows(grid: Grid) -> list[RaceRecord]:
    """
    Normalize the full results grid.

    Args:
        grid: Sheet values, header at row 0

    Returns:
        Valid records sorted by race date (stable for equal dates)
    """
    if len(grid) < 2:
        return []

    records: list[RaceRecord] = []
    rejected = 0
    # Sheet row numbers are 1-based and row 1 is the header
    for sheet_row, row in enumerate(grid[1:], start=2):
        try:
            records.append(normalize_row(row))
        except RowRejected as e:
            rejected += 1
            logger.warning(f"Skipping row {sheet_row}: {e} {list(row)!r}")

    if rejected:
        logger.info(f"Normalized {len(records)} rows, rejected {rejected}")

    records.sort(key=lambda r: r.race_date)
    return records


def normalize_schedule_rows(grid: Grid) -> list[ScheduledRace]:
    """
    Reshape the race dates grid (name, date, location, notes).

    Rows without a name or a usable date are dropped.
    """
    if len(grid) < 2:
        return []

    races: list[ScheduledRace] = []
    for sheet_row, row in enumerate(grid[1:], start=2):
        cells = _pad(row, SCHEDULE_COLUMN_COUNT)
        name = (cells[ScheduleColumn.NAME] or "").strip()
        raw_date = (cells[ScheduleColumn.DATE] or "").strip()
        if not name or not raw_date:
            continue
        try:
            race_date = parse_date(raw_date)
        except ValueError:
            logger.warning(f"Skipping schedule row {sheet_row}: invalid date {raw_date!r}")
            continue
        races.append(
            ScheduledRace(
                name=name,
                date=race_date,
                location=(cells[ScheduleColumn.LOCATION] or "").strip(),
                notes=(cells[ScheduleColumn.NOTES] or "").strip(),
            )
        )

    races.sort(key=lambda r: r.date)
    return races
