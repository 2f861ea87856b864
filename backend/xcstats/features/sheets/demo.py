"""Demo row source: serves the bundled demo.yaml in worksheet shape."""

from __future__ import annotations

from pathlib import Path

import yaml

from xcstats.config import CONTENT_DIR
from .base import Grid, RowSource

RESULTS_HEADER = [
    "Runner", "Race Date", "Race Name", "Time", "Seconds", "Distance (mi)",
    "Pace", "Projected 3-mile", "Improvement", "3-mi equiv (sec)",
    "Prev 3-mi equiv (sec)",
]
RACE_DATES_HEADER = ["Race", "Date", "Location", "Notes"]


def _cell(value) -> str:
    return "" if value is None else str(value)


class DemoSource(RowSource):
    """Loads demo results and schedule from YAML."""

    def __init__(self, path: Path | None = None):
        self.path = path or CONTENT_DIR / "demo.yaml"
        self._data: dict | None = None

    def load(self) -> dict:
        if self._data is None:
            with open(self.path, encoding="utf-8") as f:
                self._data = yaml.safe_load(f) or {}
        return self._data

    async def fetch_raw_rows(self) -> Grid:
        rows = [RESULTS_HEADER]
        for r in self.load().get("results", []):
            rows.append([
                _cell(r.get("runner")),
                _cell(r.get("date")),
                _cell(r.get("race")),
                _cell(r.get("time")),
                _cell(r.get("seconds")),
                _cell(r.get("distance_mi")),
                "",
                "",
                "",
                _cell(r.get("equiv_3mi_sec")),
            ])
        return rows

    async def fetch_raw_race_dates(self) -> Grid:
        rows = [RACE_DATES_HEADER]
        for race in self.load().get("race_dates", []):
            rows.append([
                _cell(race.get("name")),
                _cell(race.get("date")),
                _cell(race.get("location")),
                _cell(race.get("notes")),
            ])
        return rows
