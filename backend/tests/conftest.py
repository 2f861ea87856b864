"""Shared fixtures: sheet grids, a fake clock and a call-counting row source."""

import pytest

from xcstats.features.results import normalize_rows
from xcstats.features.sheets import RowSource, SourceUnavailable


HEADER = [
    "Runner", "Race Date", "Race Name", "Time", "Seconds", "Distance (mi)",
    "Pace", "Projected 3-mile", "Improvement", "3-mi equiv (sec)",
    "Prev 3-mi equiv (sec)",
]

# Six-record demo dataset
DEMO_ROWS = [
    ["Aaron Marquez", "2024-09-15", "SSC Mega Meet (3 mi)", "32:49", "1969", "3", "", "", "", "1969"],
    ["Aaron Marquez", "2024-09-22", "Mike Kuharic Invitational (5K)", "36:21", "2181", "3.11", "", "", "", "2103"],
    ["Moises Loeza", "2024-09-15", "SSC Mega Meet (3 mi)", "17:53", "1073", "3", "", "", "", "1073"],
    ["Luis Ramirez", "2024-09-15", "SSC Mega Meet (3 mi)", "18:05", "1085", "3", "", "", "", "1085"],
    ["Alexandre Garcia", "2024-09-15", "SSC Mega Meet (3 mi)", "18:15", "1095", "3", "", "", "", "1095"],
    ["Mikael Urteaga", "2024-09-15", "SSC Mega Meet (3 mi)", "18:47", "1127", "3", "", "", "", "1127"],
]

RACE_DATES = [
    ["Race", "Date", "Location", "Notes"],
    ["Reavis Invitational", "2025-10-04", "TBD"],
    ["First to the Finish Invitational", "2025-09-13", "Detweiller Park, Peoria", "State Championship Course"],
    ["Spring Opener", "2024-03-01", "Home"],
]


class FakeClock:
    """Manually advanced clock for cache tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingSource(RowSource):
    """In-memory row source that counts fetches."""

    def __init__(self, rows=None, race_dates=None, fail: bool = False):
        self.rows = [HEADER] + list(DEMO_ROWS if rows is None else rows)
        self.race_dates = RACE_DATES if race_dates is None else race_dates
        self.fail = fail
        self.row_fetches = 0
        self.race_date_fetches = 0

    async def fetch_raw_rows(self):
        self.row_fetches += 1
        if self.fail:
            raise SourceUnavailable("sheet offline")
        return self.rows

    async def fetch_raw_race_dates(self):
        self.race_date_fetches += 1
        if self.fail:
            raise SourceUnavailable("sheet offline")
        return self.race_dates


def make_row(runner, race_date, race_name, time, distance, seconds="", equiv=""):
    """Results row in sheet column order."""
    return [runner, race_date, race_name, time, seconds, distance, "", "", "", equiv]


@pytest.fixture
def demo_grid():
    return [HEADER] + DEMO_ROWS


@pytest.fixture
def demo_records(demo_grid):
    return normalize_rows(demo_grid)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def counting_source():
    return CountingSource()
