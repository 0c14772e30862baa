# -*- coding: utf-8 -*-
"""Meals — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..timeutil import parse_datetime
from .models import Meal, MealCreateRequest, MealDeleteResponse
from .storage import create_meal, delete_meal, list_meals_with_food_items

router = APIRouter(prefix="/api/meals", tags=["Meals"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[Meal], summary="List meals with food items")
def list_meals(
    date: str | None = Query(default=None, description="YYYY-MM-DD or ISO8601; restricts to that local day"),
    user: dict = Depends(get_current_user),
):
    if date and parse_datetime(date) is None:
        raise HTTPException(status_code=400, detail=f"Invalid date: {date}")
    return list_meals_with_food_items(user["id"], day=date)


@router.post("", response_model=Meal, summary="Log a meal (totals derived from food items)")
def log_meal(request: MealCreateRequest, user: dict = Depends(get_current_user)):
    meal = create_meal(user["id"], request)
    logger.info(
        "User %s logged meal %s: %d kcal from %d food items",
        user["id"],
        meal.id,
        meal.total_calories,
        len(meal.food_items),
    )
    return meal


@router.delete("/{meal_id}", response_model=MealDeleteResponse, summary="Delete a meal")
def remove_meal(meal_id: str, user: dict = Depends(get_current_user)):
    if not delete_meal(user["id"], meal_id):
        raise HTTPException(status_code=404, detail="Meal not found")
    logger.info("User %s deleted meal %s", user["id"], meal_id)
    return MealDeleteResponse()
