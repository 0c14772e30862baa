# -*- coding: utf-8 -*-
"""Workouts — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user
from .models import Workout, WorkoutCreateRequest, WorkoutDeleteResponse
from .storage import create_workout, delete_workout, get_workout, list_workouts_with_exercises

router = APIRouter(prefix="/api/workouts", tags=["Workouts"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[Workout], summary="List workouts (newest first) with exercises")
def list_workouts(user: dict = Depends(get_current_user)):
    return list_workouts_with_exercises(user["id"])


@router.post("", response_model=Workout, summary="Log a workout")
def log_workout(request: WorkoutCreateRequest, user: dict = Depends(get_current_user)):
    workout = create_workout(user["id"], request)
    logger.info("User %s logged workout %s (%d exercises)", user["id"], workout.id, len(workout.exercises))
    return workout


@router.get("/{workout_id}", response_model=Workout, summary="Get one workout with its exercises")
def read_workout(workout_id: str, user: dict = Depends(get_current_user)):
    workout = get_workout(user["id"], workout_id)
    if workout is None:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.delete("/{workout_id}", response_model=WorkoutDeleteResponse, summary="Delete a workout")
def remove_workout(workout_id: str, user: dict = Depends(get_current_user)):
    if not delete_workout(user["id"], workout_id):
        raise HTTPException(status_code=404, detail="Workout not found")
    logger.info("User %s deleted workout %s", user["id"], workout_id)
    return WorkoutDeleteResponse()
