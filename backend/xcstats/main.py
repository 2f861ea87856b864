"""
XC Stats API

FastAPI application serving cross country team statistics.
"""

from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from xcstats import __version__
from xcstats.config import settings
from xcstats.api.deps import get_results_service
from xcstats.api.v1.router import api_router
from xcstats.features.sheets import SourceUnavailable


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting XC Stats API...")
    service = get_results_service()
    logger.info(
        f"Row source: {type(service.source).__name__}, "
        f"cache TTL {service.cache.ttl_seconds}s"
    )

    yield

    await service.source.close()
    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="XC Stats API",
    description="Cross country season bests, rankings and team trends",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Errors ===
@app.exception_handler(SourceUnavailable)
async def source_unavailable_handler(request, exc: SourceUnavailable):
    """Sheet could not be read; the client may retry."""
    logger.error(f"Source unavailable: {exc}")
    return JSONResponse(
        status_code=503,
        content={"detail": "Race data is temporarily unavailable"},
    )


# === Routes ===
app.include_router(api_router, prefix="/api/v1")


# === Health Check ===
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
