# -*- coding: utf-8 -*-
"""Dashboard — Pydantic models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..workouts.models import Workout


class Goals(BaseModel):
    calories: int = 2200
    protein: int = 120
    carbs: int = 250
    fat: int = 75


class GoalProgress(BaseModel):
    """Today's intake as a fraction of each goal (1.0 = goal reached)."""

    calories: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)


class DashboardSnapshot(BaseModel):
    today_calories: int = 0
    today_protein: float = 0.0
    today_carbs: float = 0.0
    today_fat: float = 0.0
    today_water: float = 0.0
    weekly_workouts: int = Field(0, ge=0)
    total_workouts: int = Field(0, ge=0)
    current_weight: Optional[float] = None
    goals: Goals = Field(default_factory=Goals)
    goal_progress: GoalProgress = Field(default_factory=GoalProgress)
    recent_workouts: List[Workout] = Field(default_factory=list)


class WorkoutAnalytics(BaseModel):
    weekly_workouts: int = Field(0, ge=0)
    monthly_workouts: int = Field(0, ge=0)
    total_workouts: int = Field(0, ge=0)
    total_calories_burned: int = Field(0, ge=0)
    average_duration: int = Field(0, ge=0, description="minutes")
    average_calories_burned: int = Field(0, ge=0, description="kcal per workout")
    body_measurements: int = Field(0, ge=0, description="recorded measurement entries")
    by_type: Dict[str, int] = Field(default_factory=dict)
