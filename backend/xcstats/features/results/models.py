"""Data models for race results (dataclasses, no DB dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class RaceRecord:
    """One runner's result in one race."""

    runner: str  # "Luis Ramirez"
    race_date: date
    race_name: str  # "SSC Mega Meet (3 mi)"
    raw_time: str  # "18:05"
    distance_mi: float  # 3, 3.11, 2.9
    seconds: float  # 1085
    equiv_3mi_sec: float  # 1085

    @property
    def year(self) -> int:
        return self.race_date.year


@dataclass
class RunnerSummary:
    """Derived per-runner statistics."""

    runner: str
    races: list[RaceRecord] = field(default_factory=list)
    best_3mi_sec: float | None = None
    avg_3mi_sec: float | None = None
    last_race: RaceRecord | None = None
    improvement_pct_from_start: float | None = None

    @property
    def has_data(self) -> bool:
        return bool(self.races)


@dataclass
class TeamTrendPoint:
    """Team-wide average for one meet date."""

    date: date
    race_name: str
    avg_3mi_sec: float
    participant_count: int


@dataclass
class TopSevenEntry:
    """Ranked row of the top seven table."""

    runner: str
    season_best: str  # formatted, "17:53"
    latest_time: str  # formatted
    delta_from_latest_sec: float  # latest - best, > 0 = slower than best


@dataclass
class MostImprovedEntry:
    """Runner ranked by improvement from first to latest race."""

    runner: str
    improvement_pct: float  # always > 0
    first_race: str
    latest_race: str
    first_time: str  # formatted
    latest_time: str  # formatted


@dataclass
class ScheduledRace:
    """Upcoming or past meet from the race dates sheet."""

    name: str
    date: date
    location: str = ""
    notes: str = ""
