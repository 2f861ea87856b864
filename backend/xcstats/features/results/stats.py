"""Aggregations over normalized race records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from xcstats.shared.constants import MOST_IMPROVED_LIMIT, NOT_AVAILABLE, TOP_SEVEN_SIZE
from xcstats.shared.formatters import format_time
from xcstats.shared.timing import calculate_improvement_pct

from .models import (
    MostImprovedEntry,
    RaceRecord,
    RunnerSummary,
    ScheduledRace,
    TeamTrendPoint,
    TopSevenEntry,
)


def filter_by_year(
    records: Sequence[RaceRecord], year: Optional[int]
) -> list[RaceRecord]:
    """Records from one calendar year (all records if year is None)."""
    if year is None:
        return list(records)
    return [r for r in records if r.year == year]


def group_by_runner(records: Iterable[RaceRecord]) -> dict[str, list[RaceRecord]]:
    """Group records by runner, keeping first-appearance order."""
    groups: dict[str, list[RaceRecord]] = {}
    for r in records:
        groups.setdefault(r.runner, []).append(r)
    return groups


def list_runners(records: Sequence[RaceRecord]) -> list[str]:
    """Distinct runner names, alphabetically."""
    return sorted({r.runner for r in records})


def list_runners_for_year(
    records: Sequence[RaceRecord], year: Optional[int] = None
) -> list[str]:
    return list_runners(filter_by_year(records, year))


def list_available_years(records: Sequence[RaceRecord]) -> list[int]:
    """Distinct years, most recent first."""
    return sorted({r.year for r in records}, reverse=True)


def build_summary(runner: str, races: Sequence[RaceRecord]) -> RunnerSummary:
    """
    Build a RunnerSummary from one runner's chronological races.

    An empty race list gives an empty summary (no best/avg/last).
    """
    if not races:
        return RunnerSummary(runner=runner)

    times = [r.equiv_3mi_sec for r in races]
    first_race = races[0]
    last_race = races[-1]

    return RunnerSummary(
        runner=runner,
        races=list(races),
        best_3mi_sec=min(times),
        avg_3mi_sec=sum(times) / len(times),
        last_race=last_race,
        improvement_pct_from_start=calculate_improvement_pct(
            first_race.equiv_3mi_sec, last_race.equiv_3mi_sec
        ),
    )


def summarize_runner(records: Sequence[RaceRecord], name: str) -> RunnerSummary:
    """Summary for one runner (exact name match)."""
    return build_summary(name, [r for r in records if r.runner == name])


def summarize_many_runners(
    records: Sequence[RaceRecord], names: Sequence[str]
) -> list[RunnerSummary]:
    """Summaries in the order of names; unknown runners get empty summaries."""
    groups = group_by_runner(records)
    return [build_summary(name, groups.get(name, [])) for name in names]


def top_n_by_best_time(
    records: Sequence[RaceRecord], n: int, year: Optional[int] = None
) -> list[RunnerSummary]:
    """
    Top N runners by best 3-mile equivalent (lowest first).

    Ties keep the order in which runners first appear.
    """
    groups = group_by_runner(filter_by_year(records, year))
    summaries = [build_summary(runner, races) for runner, races in groups.items()]
    ranked = [s for s in summaries if s.best_3mi_sec is not None]
    ranked.sort(key=lambda s: s.best_3mi_sec)
    return ranked[: max(n, 0)]


@dataclass
class _MeetTotals:
    """Running totals for one meet date."""

    race_name: str
    total_3mi_sec: float = 0.0
    count: int = 0


def team_trends(
    records: Sequence[RaceRecord], year: Optional[int] = None
) -> list[TeamTrendPoint]:
    """
    Average 3-mile equivalent per meet date.

    The label is the race name of the first record on that date.
    """
    meets: dict[date, _MeetTotals] = {}
    for r in filter_by_year(records, year):
        meet = meets.get(r.race_date)
        if meet is None:
            meet = meets[r.race_date] = _MeetTotals(race_name=r.race_name)
        meet.total_3mi_sec += r.equiv_3mi_sec
        meet.count += 1

    points = [
        TeamTrendPoint(
            date=meet_date,
            race_name=meet.race_name,
            avg_3mi_sec=meet.total_3mi_sec / meet.count,
            participant_count=meet.count,
        )
        for meet_date, meet in meets.items()
    ]
    points.sort(key=lambda p: p.date)
    return points


def top_seven(
    records: Sequence[RaceRecord], year: Optional[int] = None
) -> list[TopSevenEntry]:
    """Top seven table rows: season best, latest race and the gap between them."""
    entries = []
    for summary in top_n_by_best_time(records, TOP_SEVEN_SIZE, year):
        best = summary.best_3mi_sec
        last = summary.last_race

        entries.append(
            TopSevenEntry(
                runner=summary.runner,
                season_best=format_time(best) if best is not None else NOT_AVAILABLE,
                latest_time=format_time(last.equiv_3mi_sec) if last else NOT_AVAILABLE,
                delta_from_latest_sec=(
                    last.equiv_3mi_sec - best if best is not None and last else 0.0
                ),
            )
        )
    return entries


def most_improved(
    records: Sequence[RaceRecord],
    year: Optional[int] = None,
    limit: int = MOST_IMPROVED_LIMIT,
) -> list[MostImprovedEntry]:
    """
    Runners ranked by improvement from first to latest race.

    Needs at least two races; only positive improvement counts.
    """
    improved = []
    for runner, races in group_by_runner(filter_by_year(records, year)).items():
        if len(races) < 2:
            continue

        first_race = races[0]
        last_race = races[-1]
        pct = calculate_improvement_pct(first_race.equiv_3mi_sec, last_race.equiv_3mi_sec)
        if pct <= 0:
            continue

        improved.append(
            MostImprovedEntry(
                runner=runner,
                improvement_pct=pct,
                first_race=first_race.race_name,
                latest_race=last_race.race_name,
                first_time=format_time(first_race.equiv_3mi_sec),
                latest_time=format_time(last_race.equiv_3mi_sec),
            )
        )

    improved.sort(key=lambda e: e.improvement_pct, reverse=True)
    return improved[: max(limit, 0)]


def search_races(records: Sequence[RaceRecord], query: str) -> list[RaceRecord]:
    """Case-insensitive partial match on race name or runner."""
    query_lower = query.lower()
    return [
        r
        for r in records
        if query_lower in r.race_name.lower() or query_lower in r.runner.lower()
    ]


def scheduled_races_for_year(
    schedule: Sequence[ScheduledRace], year: int
) -> list[ScheduledRace]:
    return [race for race in schedule if race.date.year == year]
