"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from xcstats.api.v1.routes import results, schedule, revalidate

api_router = APIRouter()

api_router.include_router(results.router, prefix="/results", tags=["Results"])
api_router.include_router(schedule.router, prefix="/schedule", tags=["Schedule"])
api_router.include_router(revalidate.router, tags=["Revalidate"])
