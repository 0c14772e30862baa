# -*- coding: utf-8 -*-
"""
FitTrack API

Workout, meal, body-measurement and water logging plus dashboard statistics.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import init_app_db
from .auth.api import router as auth_router
from .auth.security import authenticate_request
from .config import settings
from .dashboard.api import router as dashboard_router
from .meals.api import router as meals_router
from .measurements.api import router as measurements_router
from .profile.api import router as profile_router
from .water.api import router as water_router
from .workouts.api import router as workouts_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="FitTrack",
    description="Personal fitness tracking: workouts, meals, body measurements, water and dashboard stats",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)


_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/register",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    path = request.url.path
    if path.startswith("/api") and path != "/api/health" and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        try:
            user = authenticate_request(request)
            request.state.user = user
        except HTTPException as exc:
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    return await call_next(request)


app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(workouts_router)
app.include_router(meals_router)
app.include_router(measurements_router)
app.include_router(water_router)
app.include_router(dashboard_router)


@app.get("/api/health", tags=["Meta"])
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        port = int(settings.port_raw)
    except ValueError:
        logger.warning("Invalid port %r, falling back to 8000", settings.port_raw)
        port = 8000

    logger.info("Starting FitTrack on %s:%d (db=%s)", settings.host, port, settings.app_db_path)
    uvicorn.run("fittrack.api:app", host=settings.host, port=port, reload=False)
