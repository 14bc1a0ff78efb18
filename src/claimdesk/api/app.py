"""
ClaimDesk FastAPI Application.

Main API application for the claims desk: claims, tasks, activities,
documents, dashboard statistics and AI insights.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from claimdesk import __version__
from claimdesk.api.routes import activities, claims, documents, insights, stats, tasks
from claimdesk.config import settings
from claimdesk.logging_config import setup_logging
from claimdesk.startup import run_all_startup_checks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Runs startup checks before the application starts serving requests.
    """
    setup_logging(context="api")

    logger.info("Running startup checks...")
    run_all_startup_checks()
    logger.info("✓ Startup checks passed")

    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    lifespan=lifespan,
    title="ClaimDesk API",
    description="API for trucking claims management with AI-powered insights",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - API health check."""
    return {
        "status": "ok",
        "message": "ClaimDesk API is running",
        "version": __version__,
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    from claimdesk.db.connection import check_connection

    db_status = "healthy" if check_connection() else "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "database": db_status,
    }


app.include_router(claims.router, prefix="/claims", tags=["claims"])
app.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
app.include_router(activities.router, prefix="/activities", tags=["activities"])
app.include_router(documents.router, prefix="/documents", tags=["documents"])
app.include_router(stats.router, prefix="/stats", tags=["stats"])
app.include_router(insights.router, prefix="/insights", tags=["insights"])
