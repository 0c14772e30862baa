# -*- coding: utf-8 -*-
"""Workouts — DB storage helpers (workouts + exercises)."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..timeutil import utc_now_iso
from .models import Exercise, Workout, WorkoutCreateRequest


def _row_to_workout(row: Dict) -> Workout:
    return Workout(
        id=row["id"],
        user_id=row["user_id"],
        name=row["name"],
        date=row["date"],
        duration=row.get("duration"),
        calories_burned=row.get("calories_burned"),
        type=row["type"],
        notes=row.get("notes"),
        created_at=row["created_at"],
    )


def _row_to_exercise(row: Dict) -> Exercise:
    return Exercise(
        id=row["id"],
        workout_id=row["workout_id"],
        name=row["name"],
        sets=row.get("sets"),
        reps=row.get("reps"),
        weight=row.get("weight"),
        distance=row.get("distance"),
        duration=row.get("duration"),
    )


def create_workout(user_id: str, request: WorkoutCreateRequest, db_path: Path | None = None) -> Workout:
    workout_id = str(uuid4())
    now = utc_now_iso()
    exercises: List[Exercise] = []
    with db_conn(db_path or settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO workouts (id, user_id, name, date, duration, calories_burned, type, notes, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                workout_id,
                user_id,
                request.name,
                request.date,
                request.duration,
                request.calories_burned,
                request.type.value,
                request.notes,
                now,
            ),
        )
        for position, ex in enumerate(request.exercises):
            exercise = Exercise(id=str(uuid4()), workout_id=workout_id, **ex.model_dump())
            conn.execute(
                """
                INSERT INTO exercises (id, workout_id, name, sets, reps, weight, distance, duration, position)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    exercise.id,
                    workout_id,
                    exercise.name,
                    exercise.sets,
                    exercise.reps,
                    exercise.weight,
                    exercise.distance,
                    exercise.duration,
                    position,
                ),
            )
            exercises.append(exercise)

    return Workout(
        id=workout_id,
        user_id=user_id,
        name=request.name,
        date=request.date,
        duration=request.duration,
        calories_burned=request.calories_burned,
        type=request.type,
        notes=request.notes,
        created_at=now,
        exercises=exercises,
    )


def get_workouts(user_id: str, db_path: Path | None = None) -> List[Workout]:
    """All workouts of a user in insertion order, without exercises."""
    with db_conn(db_path or settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM workouts WHERE user_id = ? ORDER BY rowid ASC",
            (user_id,),
        ).fetchall()
    return [_row_to_workout(dict(r)) for r in rows]


def get_exercises_by_workout(workout_id: str, db_path: Path | None = None) -> List[Exercise]:
    with db_conn(db_path or settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM exercises WHERE workout_id = ? ORDER BY position ASC",
            (workout_id,),
        ).fetchall()
    return [_row_to_exercise(dict(r)) for r in rows]


def get_workout(user_id: str, workout_id: str, db_path: Path | None = None) -> Optional[Workout]:
    """One workout owned by ``user_id`` with its exercises, or None."""
    with db_conn(db_path or settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM workouts WHERE id = ? AND user_id = ?",
            (workout_id, user_id),
        ).fetchone()
    if not row:
        return None
    workout = _row_to_workout(dict(row))
    workout.exercises = get_exercises_by_workout(workout_id, db_path=db_path)
    return workout


def list_workouts_with_exercises(user_id: str, db_path: Path | None = None) -> List[Workout]:
    """Newest first (ties in insertion order), each carrying its exercises."""
    with db_conn(db_path or settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM workouts WHERE user_id = ? ORDER BY date DESC, rowid ASC",
            (user_id,),
        ).fetchall()
        ex_rows = conn.execute(
            """
            SELECT e.* FROM exercises e
            JOIN workouts w ON w.id = e.workout_id
            WHERE w.user_id = ?
            ORDER BY e.position ASC
            """,
            (user_id,),
        ).fetchall()

    by_workout: Dict[str, List[Exercise]] = {}
    for r in ex_rows:
        ex = _row_to_exercise(dict(r))
        by_workout.setdefault(ex.workout_id, []).append(ex)

    out: List[Workout] = []
    for r in rows:
        workout = _row_to_workout(dict(r))
        workout.exercises = by_workout.get(workout.id, [])
        out.append(workout)
    return out


def delete_workout(user_id: str, workout_id: str, db_path: Path | None = None) -> bool:
    """Delete a workout owned by ``user_id``; its exercises go with it (FK cascade)."""
    with db_conn(db_path or settings.app_db_path) as conn:
        cur = conn.execute(
            "DELETE FROM workouts WHERE id = ? AND user_id = ?",
            (workout_id, user_id),
        )
        return cur.rowcount > 0
