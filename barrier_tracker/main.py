"""
BARRIER TRACKER Planner API - Main Application

Backend for the ADHD daily planner: energy check-ins, focus and life tasks,
hard-stop aware capacity and contextual guidance.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barrier_tracker.config import settings
from barrier_tracker.database import database
from barrier_tracker.barriers import barriers_router
from barrier_tracker.checkins import checkins_router
from barrier_tracker.command_center import command_center_router
from barrier_tracker.preferences import preferences_router
from barrier_tracker.schedule import schedule_router
from barrier_tracker.tasks import tasks_router
from barrier_tracker.security import validate_security_config

import logging

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    validate_security_config()
    await database.connect()
    await database.ensure_indexes()

    yield

    await database.disconnect()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Energy-aware daily planning for ADHD brains",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# CORS_ORIGINS is comma-separated; defaults to the local web client
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns the service status and version information.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/", tags=["Root"])
async def root() -> dict:
    """Root endpoint with service information."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


app.include_router(checkins_router)
app.include_router(tasks_router)
app.include_router(command_center_router)
app.include_router(preferences_router)
app.include_router(schedule_router)
app.include_router(barriers_router)
