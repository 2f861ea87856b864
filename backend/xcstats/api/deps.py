"""
API dependencies.

One ResultsService per process; tests swap it through
app.dependency_overrides.
"""

import logging
from typing import Optional

from xcstats.config import settings
from xcstats.features.results import ResultsService
from xcstats.features.sheets import DemoSource, GoogleSheetsClient, RowSource
from xcstats.shared.cache import QueryCache

logger = logging.getLogger(__name__)

_service: Optional[ResultsService] = None


def build_source() -> RowSource:
    """Google Sheets when a spreadsheet is configured, demo data otherwise."""
    if settings.use_demo_data:
        logger.info("GOOGLE_SHEETS_SPREADSHEET_ID not set, serving demo data")
        return DemoSource()
    return GoogleSheetsClient()


def get_results_service() -> ResultsService:
    """Get or create the global ResultsService."""
    global _service
    if _service is None:
        _service = ResultsService(
            source=build_source(),
            cache=QueryCache(ttl_seconds=settings.cache_ttl_seconds),
        )
    return _service
