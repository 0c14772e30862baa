# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class DietaryPreference(str, Enum):
    omnivore = "omnivore"
    vegetarian = "vegetarian"
    non_vegetarian = "non-vegetarian"


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=6, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    dietary_preference: DietaryPreference = DietaryPreference.omnivore
    daily_calorie_goal: Optional[int] = Field(None, ge=0)
    daily_protein_goal: Optional[int] = Field(None, ge=0)
    daily_carb_goal: Optional[int] = Field(None, ge=0)
    daily_fat_goal: Optional[int] = Field(None, ge=0)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=6, max_length=128)


class UserPublic(BaseModel):
    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    created_at: str


class AuthResponse(BaseModel):
    user: UserPublic
    token: str
