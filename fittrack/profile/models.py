# -*- coding: utf-8 -*-
"""Profile — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..auth.models import DietaryPreference


class ProfileResponse(BaseModel):
    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    dietary_preference: Optional[str] = None
    daily_calorie_goal: Optional[int] = None
    daily_protein_goal: Optional[int] = None
    daily_carb_goal: Optional[int] = None
    daily_fat_goal: Optional[int] = None


class ProfileUpdateRequest(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, min_length=3, max_length=254)
    username: Optional[str] = Field(None, min_length=1, max_length=64)
    dietary_preference: Optional[DietaryPreference] = None
    daily_calorie_goal: Optional[int] = Field(None, ge=0)
    daily_protein_goal: Optional[int] = Field(None, ge=0)
    daily_carb_goal: Optional[int] = Field(None, ge=0)
    daily_fat_goal: Optional[int] = Field(None, ge=0)
