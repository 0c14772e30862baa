# -*- coding: utf-8 -*-
"""Workouts — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..timeutil import normalize_timestamp


class WorkoutType(str, Enum):
    strength = "strength"
    cardio = "cardio"
    flexibility = "flexibility"
    sports = "sports"


class ExerciseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0, description="kg")
    distance: Optional[float] = Field(None, ge=0, description="km, for cardio")
    duration: Optional[int] = Field(None, ge=0, description="seconds")


class Exercise(ExerciseCreate):
    id: str
    workout_id: str


class WorkoutCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    date: str = Field(..., description="ISO8601 timestamp or YYYY-MM-DD")
    duration: Optional[int] = Field(None, ge=0, description="minutes")
    calories_burned: Optional[int] = Field(None, ge=0)
    type: WorkoutType
    notes: Optional[str] = Field(None, max_length=2000)
    exercises: List[ExerciseCreate] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: object) -> str:
        return normalize_timestamp(value)


class Workout(BaseModel):
    id: str
    user_id: str
    name: str
    date: str
    duration: Optional[int] = None
    calories_burned: Optional[int] = None
    type: WorkoutType
    notes: Optional[str] = None
    created_at: str
    exercises: List[Exercise] = Field(default_factory=list)


class WorkoutDeleteResponse(BaseModel):
    message: str = "Workout deleted"
