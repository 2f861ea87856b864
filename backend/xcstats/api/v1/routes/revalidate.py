"""
Revalidation route.

Clears the query cache so the next request rereads the sheet.
Protected by a shared secret in the query string.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query

from xcstats.api.deps import get_results_service
from xcstats.config import settings
from xcstats.features.results import ResultsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/revalidate")
async def revalidate(
    secret: str = Query(""),
    service: ResultsService = Depends(get_results_service),
):
    """Drop every cached query."""
    if not settings.revalidate_secret:
        raise HTTPException(status_code=500, detail="Revalidation not configured")
    if secret != settings.revalidate_secret:
        raise HTTPException(status_code=401, detail="Invalid secret")

    service.clear_cache()
    logger.info("Cache revalidated")

    return {
        "message": "Revalidation successful",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
