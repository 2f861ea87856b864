"""
Schedule API Routes

Meet dates from the race dates worksheet.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from xcstats.api.deps import get_results_service
from xcstats.features.results import ResultsService
from xcstats.features.results.schemas import ScheduledRaceSchema

router = APIRouter()


@router.get("", response_model=list[ScheduledRaceSchema])
async def list_schedule(
    year: Optional[int] = Query(None),
    service: ResultsService = Depends(get_results_service),
):
    """Scheduled meets sorted by date, optionally for one year."""
    if year is None:
        races = await service.list_scheduled_races()
    else:
        races = await service.scheduled_races_for_year(year)
    return [ScheduledRaceSchema.from_race(r) for r in races]
