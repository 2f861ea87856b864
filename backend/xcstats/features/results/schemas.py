"""
Results API schemas.

Pydantic schemas for API response serialization.
"""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel

from xcstats.shared.formatters import format_improvement_pct, format_time

from .models import (
    MostImprovedEntry,
    RaceRecord,
    RunnerSummary,
    ScheduledRace,
    TeamTrendPoint,
    TopSevenEntry,
)


class RaceRecordSchema(BaseModel):
    """Single normalized race result."""
    runner: str
    race_date: dt.date
    race_name: str
    raw_time: str
    distance_mi: float
    seconds: float
    equiv_3mi_sec: float
    equiv_3mi_time: str

    @classmethod
    def from_record(cls, record: RaceRecord) -> "RaceRecordSchema":
        return cls(
            runner=record.runner,
            race_date=record.race_date,
            race_name=record.race_name,
            raw_time=record.raw_time,
            distance_mi=record.distance_mi,
            seconds=record.seconds,
            equiv_3mi_sec=record.equiv_3mi_sec,
            equiv_3mi_time=format_time(record.equiv_3mi_sec),
        )


class RunnerSummarySchema(BaseModel):
    """Per-runner summary; races is empty when the runner has no data."""
    runner: str
    races: List[RaceRecordSchema] = []
    best_3mi_sec: Optional[float] = None
    best_3mi_time: Optional[str] = None
    avg_3mi_sec: Optional[float] = None
    avg_3mi_time: Optional[str] = None
    last_race: Optional[RaceRecordSchema] = None
    improvement_pct_from_start: Optional[float] = None
    improvement: Optional[str] = None

    @classmethod
    def from_summary(cls, summary: RunnerSummary) -> "RunnerSummarySchema":
        best = summary.best_3mi_sec
        avg = summary.avg_3mi_sec
        pct = summary.improvement_pct_from_start
        return cls(
            runner=summary.runner,
            races=[RaceRecordSchema.from_record(r) for r in summary.races],
            best_3mi_sec=best,
            best_3mi_time=format_time(best) if best is not None else None,
            avg_3mi_sec=avg,
            avg_3mi_time=format_time(avg) if avg is not None else None,
            last_race=(
                RaceRecordSchema.from_record(summary.last_race)
                if summary.last_race else None
            ),
            improvement_pct_from_start=pct,
            improvement=format_improvement_pct(pct) if pct is not None else None,
        )


class TeamTrendPointSchema(BaseModel):
    date: dt.date
    race_name: str
    avg_3mi_sec: float
    avg_3mi_time: str
    participant_count: int

    @classmethod
    def from_point(cls, point: TeamTrendPoint) -> "TeamTrendPointSchema":
        return cls(
            date=point.date,
            race_name=point.race_name,
            avg_3mi_sec=point.avg_3mi_sec,
            avg_3mi_time=format_time(point.avg_3mi_sec),
            participant_count=point.participant_count,
        )


class TopSevenEntrySchema(BaseModel):
    runner: str
    season_best: str
    latest_time: str
    delta_from_latest_sec: float

    @classmethod
    def from_entry(cls, entry: TopSevenEntry) -> "TopSevenEntrySchema":
        return cls(
            runner=entry.runner,
            season_best=entry.season_best,
            latest_time=entry.latest_time,
            delta_from_latest_sec=entry.delta_from_latest_sec,
        )


class MostImprovedEntrySchema(BaseModel):
    runner: str
    improvement_pct: float
    improvement: str  # "+10.0%"
    first_race: str
    latest_race: str
    first_time: str
    latest_time: str

    @classmethod
    def from_entry(cls, entry: MostImprovedEntry) -> "MostImprovedEntrySchema":
        return cls(
            runner=entry.runner,
            improvement_pct=entry.improvement_pct,
            improvement=format_improvement_pct(entry.improvement_pct),
            first_race=entry.first_race,
            latest_race=entry.latest_race,
            first_time=entry.first_time,
            latest_time=entry.latest_time,
        )


class ScheduledRaceSchema(BaseModel):
    name: str
    date: dt.date
    location: str = ""
    notes: str = ""

    @classmethod
    def from_race(cls, race: ScheduledRace) -> "ScheduledRaceSchema":
        return cls(
            name=race.name,
            date=race.date,
            location=race.location,
            notes=race.notes,
        )
