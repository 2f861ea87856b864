"""ResultsService: cached async access to normalized records and aggregates."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from xcstats.features.sheets import RowSource, SourceUnavailable
from xcstats.shared.cache import QueryCache
from xcstats.shared.constants import MOST_IMPROVED_LIMIT

from . import stats
from .models import (
    MostImprovedEntry,
    RaceRecord,
    RunnerSummary,
    ScheduledRace,
    TeamTrendPoint,
    TopSevenEntry,
)
from .normalizer import normalize_rows, normalize_schedule_rows

logger = logging.getLogger(__name__)


class ResultsService:
    """
    Query facade used by the API layer.

    Every query goes through the cache under its own key
    (query name + parameters). The normalized records are cached too,
    so derived queries do not refetch the sheet.

    SourceUnavailable from the row source propagates unchanged.
    """

    def __init__(self, source: RowSource, cache: Optional[QueryCache] = None):
        self.source = source
        self.cache = cache or QueryCache()

    # -------------------------------------------------------------------------
    # Records
    # -------------------------------------------------------------------------

    async def get_all_records(self) -> list[RaceRecord]:
        """All normalized records, sorted by date."""
        return await self.cache.get_or_compute("all-records", self._load_records)

    async def _load_records(self) -> list[RaceRecord]:
        grid = await self.source.fetch_raw_rows()
        records = normalize_rows(grid)
        logger.info(f"Loaded {len(records)} race records")
        return records

    async def _cached(self, key, func, *args):
        async def compute():
            records = await self.get_all_records()
            return func(records, *args)

        return await self.cache.get_or_compute(key, compute)

    # -------------------------------------------------------------------------
    # Runners
    # -------------------------------------------------------------------------

    async def list_runners(self) -> list[str]:
        return await self._cached("runners", stats.list_runners)

    async def list_runners_for_year(self, year: Optional[int] = None) -> list[str]:
        if year is None:
            return await self.list_runners()
        return await self._cached(("runners", year), stats.list_runners_for_year, year)

    async def list_available_years(self) -> list[int]:
        return await self._cached("available-years", stats.list_available_years)

    async def summarize_runner(self, name: str) -> RunnerSummary:
        return await self._cached(("runner-summary", name), stats.summarize_runner, name)

    async def summarize_many_runners(self, names: Sequence[str]) -> list[RunnerSummary]:
        names = tuple(names)
        return await self._cached(
            ("runner-summaries", names), stats.summarize_many_runners, names
        )

    # -------------------------------------------------------------------------
    # Rankings and trends
    # -------------------------------------------------------------------------

    async def top_n_by_best_time(
        self, n: int, year: Optional[int] = None
    ) -> list[RunnerSummary]:
        return await self._cached(
            ("top-n", n, year), stats.top_n_by_best_time, n, year
        )

    async def team_trends(self, year: Optional[int] = None) -> list[TeamTrendPoint]:
        return await self._cached(("team-trends", year), stats.team_trends, year)

    async def top_seven(self, year: Optional[int] = None) -> list[TopSevenEntry]:
        return await self._cached(("top-seven", year), stats.top_seven, year)

    async def most_improved(
        self, year: Optional[int] = None, limit: int = MOST_IMPROVED_LIMIT
    ) -> list[MostImprovedEntry]:
        return await self._cached(
            ("most-improved", year, limit), stats.most_improved, year, limit
        )

    async def search_races(self, query: str) -> list[RaceRecord]:
        return await self._cached(("search", query), stats.search_races, query)

    # -------------------------------------------------------------------------
    # Schedule
    # -------------------------------------------------------------------------

    async def list_scheduled_races(self) -> list[ScheduledRace]:
        """
        Meet schedule from the race dates worksheet.

        A failing fetch is logged and yields an empty schedule.
        """
        return await self.cache.get_or_compute("upcoming-races", self._load_schedule)

    async def _load_schedule(self) -> list[ScheduledRace]:
        try:
            grid = await self.source.fetch_raw_race_dates()
        except SourceUnavailable as e:
            logger.error(f"Error fetching race dates: {e}")
            return []
        return normalize_schedule_rows(grid)

    async def scheduled_races_for_year(self, year: int) -> list[ScheduledRace]:
        schedule = await self.list_scheduled_races()
        return stats.scheduled_races_for_year(schedule, year)

    def clear_cache(self) -> None:
        self.cache.clear()
