"""
Results feature module: sheet rows → race records → rankings.

Usage:
    from xcstats.features.results import ResultsService, normalize_rows
    from xcstats.features.results import stats
"""

from .models import (
    RaceRecord,
    RunnerSummary,
    TeamTrendPoint,
    TopSevenEntry,
    MostImprovedEntry,
    ScheduledRace,
)
from .normalizer import normalize_rows, normalize_schedule_rows, parse_date
from .service import ResultsService

__all__ = [
    # Models
    "RaceRecord",
    "RunnerSummary",
    "TeamTrendPoint",
    "TopSevenEntry",
    "MostImprovedEntry",
    "ScheduledRace",
    # Normalizer
    "normalize_rows",
    "normalize_schedule_rows",
    "parse_date",
    # Service
    "ResultsService",
]
