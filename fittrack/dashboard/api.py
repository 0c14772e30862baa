# -*- coding: utf-8 -*-
"""Dashboard — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from .analytics import compute_workout_analytics
from .models import DashboardSnapshot, WorkoutAnalytics
from .stats import UserNotFoundError, compute_dashboard_stats
from .store import SqliteStore, get_store

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardSnapshot, summary="Today's totals, workout counts and goals")
def dashboard_stats(user: dict = Depends(get_current_user), store: SqliteStore = Depends(get_store)):
    try:
        return compute_dashboard_stats(store, user["id"])
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail="User not found") from exc


@router.get("/analytics", response_model=WorkoutAnalytics, summary="Weekly/monthly workout analytics")
def workout_analytics(user: dict = Depends(get_current_user), store: SqliteStore = Depends(get_store)):
    try:
        return compute_workout_analytics(store, user["id"])
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail="User not found") from exc
