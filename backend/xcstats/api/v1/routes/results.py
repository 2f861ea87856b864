"""
Results API Routes

Endpoints for race records, runner summaries, rankings and team trends.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from xcstats.api.deps import get_results_service
from xcstats.features.results import ResultsService
from xcstats.features.results.schemas import (
    MostImprovedEntrySchema,
    RaceRecordSchema,
    RunnerSummarySchema,
    TeamTrendPointSchema,
    TopSevenEntrySchema,
)
from xcstats.shared.constants import MOST_IMPROVED_LIMIT, TOP_SEVEN_SIZE

router = APIRouter()


@router.get("/records", response_model=list[RaceRecordSchema])
async def get_records(service: ResultsService = Depends(get_results_service)):
    """All normalized race records, oldest first."""
    records = await service.get_all_records()
    return [RaceRecordSchema.from_record(r) for r in records]


@router.get("/runners", response_model=list[str])
async def list_runners(
    year: Optional[int] = Query(None),
    service: ResultsService = Depends(get_results_service),
):
    """Runner names, optionally only those who raced in a year."""
    return await service.list_runners_for_year(year)


@router.get("/runners/{name}", response_model=RunnerSummarySchema)
async def get_runner(
    name: str,
    service: ResultsService = Depends(get_results_service),
):
    """Season summary for one runner."""
    summary = await service.summarize_runner(name)
    if not summary.has_data:
        raise HTTPException(status_code=404, detail=f"Runner not found: {name}")
    return RunnerSummarySchema.from_summary(summary)


@router.get("/years", response_model=list[int])
async def list_years(service: ResultsService = Depends(get_results_service)):
    """Years with results, most recent first."""
    return await service.list_available_years()


@router.get("/compare", response_model=list[RunnerSummarySchema])
async def compare_runners(
    names: List[str] = Query(...),
    service: ResultsService = Depends(get_results_service),
):
    """Summaries for several runners, in request order."""
    summaries = await service.summarize_many_runners(names)
    return [RunnerSummarySchema.from_summary(s) for s in summaries]


@router.get("/top", response_model=list[RunnerSummarySchema])
async def top_runners(
    n: int = Query(TOP_SEVEN_SIZE, ge=1),
    year: Optional[int] = Query(None),
    service: ResultsService = Depends(get_results_service),
):
    """Top N runners by best 3-mile equivalent."""
    summaries = await service.top_n_by_best_time(n, year)
    return [RunnerSummarySchema.from_summary(s) for s in summaries]


@router.get("/top-seven", response_model=list[TopSevenEntrySchema])
async def top_seven(
    year: Optional[int] = Query(None),
    service: ResultsService = Depends(get_results_service),
):
    entries = await service.top_seven(year)
    return [TopSevenEntrySchema.from_entry(e) for e in entries]


@router.get("/most-improved", response_model=list[MostImprovedEntrySchema])
async def most_improved(
    year: Optional[int] = Query(None),
    limit: int = Query(MOST_IMPROVED_LIMIT, ge=1),
    service: ResultsService = Depends(get_results_service),
):
    entries = await service.most_improved(year, limit)
    return [MostImprovedEntrySchema.from_entry(e) for e in entries]


@router.get("/team-trends", response_model=list[TeamTrendPointSchema])
async def team_trends(
    year: Optional[int] = Query(None),
    service: ResultsService = Depends(get_results_service),
):
    """Team average 3-mile equivalent per meet."""
    points = await service.team_trends(year)
    return [TeamTrendPointSchema.from_point(p) for p in points]


@router.get("/search", response_model=list[RaceRecordSchema])
async def search(
    q: str = Query(..., min_length=1),
    service: ResultsService = Depends(get_results_service),
):
    """Search records by race or runner name."""
    records = await service.search_races(q)
    return [RaceRecordSchema.from_record(r) for r in records]
