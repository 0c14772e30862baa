# -*- coding: utf-8 -*-
"""Meals — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..timeutil import normalize_timestamp


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class MealTotals(BaseModel):
    total_calories: int = Field(0, ge=0)
    total_protein: float = Field(0.0, ge=0)
    total_carbs: float = Field(0.0, ge=0)
    total_fat: float = Field(0.0, ge=0)


class FoodItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    quantity: float = Field(..., ge=0, description="grams")
    calories_per_gram: float = Field(..., ge=0)
    protein_per_gram: float = Field(0.0, ge=0)
    carbs_per_gram: float = Field(0.0, ge=0)
    fat_per_gram: float = Field(0.0, ge=0)


class FoodItem(FoodItemCreate):
    id: str
    meal_id: str


class MealCreateRequest(MealTotals):
    """Totals are only honoured when no food items are given; otherwise they are derived."""

    name: str = Field(..., min_length=1, max_length=200)
    type: MealType
    date: str = Field(..., description="ISO8601 timestamp or YYYY-MM-DD")
    food_items: List[FoodItemCreate] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: object) -> str:
        return normalize_timestamp(value)


class Meal(MealTotals):
    id: str
    user_id: str
    name: str
    type: MealType
    date: str
    created_at: str
    food_items: List[FoodItem] = Field(default_factory=list)


class MealDeleteResponse(BaseModel):
    message: str = "Meal deleted"
