# -*- coding: utf-8 -*-
"""Water intake — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..timeutil import local_now, parse_datetime
from .models import WaterIntake, WaterIntakeCreateRequest
from .storage import create_water_intake, get_water_intake

router = APIRouter(prefix="/api/water", tags=["Water"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[WaterIntake], summary="Water intake for one day (default today)")
def list_water(
    date: str | None = Query(default=None, description="YYYY-MM-DD or ISO8601"),
    user: dict = Depends(get_current_user),
):
    day = parse_datetime(date) if date else local_now()
    if day is None:
        raise HTTPException(status_code=400, detail=f"Invalid date: {date}")
    return get_water_intake(user["id"], day)


@router.post("", response_model=WaterIntake, summary="Log water intake")
def log_water(request: WaterIntakeCreateRequest, user: dict = Depends(get_current_user)):
    intake = create_water_intake(user["id"], request)
    logger.info("User %s logged water intake %s: %.2f L", user["id"], intake.id, intake.amount)
    return intake
