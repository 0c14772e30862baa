# -*- coding: utf-8 -*-
"""Meals — DB storage helpers (meals + food items)."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..rounding import round_half_up, round_to_int
from ..timeutil import day_window, utc_now_iso
from .models import FoodItem, FoodItemCreate, Meal, MealCreateRequest, MealTotals


def compute_totals(items: Iterable[FoodItemCreate]) -> MealTotals:
    """Meal totals from food items: quantity (g) x per-gram density, summed.

    Calories are rounded half up to an integer, macros half up to one decimal place.
    """
    calories = 0.0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    for item in items:
        calories += item.quantity * item.calories_per_gram
        protein += item.quantity * (item.protein_per_gram or 0.0)
        carbs += item.quantity * (item.carbs_per_gram or 0.0)
        fat += item.quantity * (item.fat_per_gram or 0.0)
    return MealTotals(
        total_calories=round_to_int(calories),
        total_protein=round_half_up(protein, 1),
        total_carbs=round_half_up(carbs, 1),
        total_fat=round_half_up(fat, 1),
    )


def _row_to_meal(row: Dict) -> Meal:
    return Meal(
        id=row["id"],
        user_id=row["user_id"],
        name=row["name"],
        type=row["type"],
        date=row["date"],
        total_calories=row.get("total_calories") or 0,
        total_protein=row.get("total_protein") or 0.0,
        total_carbs=row.get("total_carbs") or 0.0,
        total_fat=row.get("total_fat") or 0.0,
        created_at=row["created_at"],
    )


def _row_to_food_item(row: Dict) -> FoodItem:
    return FoodItem(
        id=row["id"],
        meal_id=row["meal_id"],
        name=row["name"],
        quantity=row["quantity"],
        calories_per_gram=row["calories_per_gram"],
        protein_per_gram=row.get("protein_per_gram") or 0.0,
        carbs_per_gram=row.get("carbs_per_gram") or 0.0,
        fat_per_gram=row.get("fat_per_gram") or 0.0,
    )


def create_meal(user_id: str, request: MealCreateRequest, db_path: Path | None = None) -> Meal:
    meal_id = str(uuid4())
    now = utc_now_iso()
    if request.food_items:
        totals = compute_totals(request.food_items)
    else:
        totals = MealTotals(
            total_calories=request.total_calories,
            total_protein=request.total_protein,
            total_carbs=request.total_carbs,
            total_fat=request.total_fat,
        )

    food_items: List[FoodItem] = []
    with db_conn(db_path or settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO meals (
                id, user_id, name, type, date, total_calories, total_protein, total_carbs, total_fat, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                meal_id,
                user_id,
                request.name,
                request.type.value,
                request.date,
                totals.total_calories,
                totals.total_protein,
                totals.total_carbs,
                totals.total_fat,
                now,
            ),
        )
        for position, fi in enumerate(request.food_items):
            item = FoodItem(id=str(uuid4()), meal_id=meal_id, **fi.model_dump())
            conn.execute(
                """
                INSERT INTO food_items (
                    id, meal_id, name, quantity, calories_per_gram,
                    protein_per_gram, carbs_per_gram, fat_per_gram, position
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    item.id,
                    meal_id,
                    item.name,
                    item.quantity,
                    item.calories_per_gram,
                    item.protein_per_gram,
                    item.carbs_per_gram,
                    item.fat_per_gram,
                    position,
                ),
            )
            food_items.append(item)

    return Meal(
        id=meal_id,
        user_id=user_id,
        name=request.name,
        type=request.type,
        date=request.date,
        created_at=now,
        food_items=food_items,
        **totals.model_dump(),
    )


def get_meals_by_date(user_id: str, day: datetime | str, db_path: Path | None = None) -> List[Meal]:
    """Meals whose date falls on the local calendar day of ``day``, in insertion order."""
    start, end = day_window(day)
    with db_conn(db_path or settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM meals WHERE user_id = ? AND date >= ? AND date < ? ORDER BY rowid ASC",
            (user_id, start, end),
        ).fetchall()
    return [_row_to_meal(dict(r)) for r in rows]


def get_food_items_by_meal(meal_id: str, db_path: Path | None = None) -> List[FoodItem]:
    with db_conn(db_path or settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM food_items WHERE meal_id = ? ORDER BY position ASC",
            (meal_id,),
        ).fetchall()
    return [_row_to_food_item(dict(r)) for r in rows]


def list_meals_with_food_items(
    user_id: str,
    *,
    day: Optional[str] = None,
    db_path: Path | None = None,
) -> List[Meal]:
    """All meals newest first, or only those on ``day``; each carrying its food items."""
    if day:
        meals = get_meals_by_date(user_id, day, db_path=db_path)
    else:
        with db_conn(db_path or settings.app_db_path) as conn:
            rows = conn.execute(
                "SELECT * FROM meals WHERE user_id = ? ORDER BY date DESC, rowid ASC",
                (user_id,),
            ).fetchall()
        meals = [_row_to_meal(dict(r)) for r in rows]

    for meal in meals:
        meal.food_items = get_food_items_by_meal(meal.id, db_path=db_path)
    return meals


def delete_meal(user_id: str, meal_id: str, db_path: Path | None = None) -> bool:
    """Delete a meal owned by ``user_id``; its food items go with it (FK cascade)."""
    with db_conn(db_path or settings.app_db_path) as conn:
        cur = conn.execute(
            "DELETE FROM meals WHERE id = ? AND user_id = ?",
            (meal_id, user_id),
        )
        return cur.rowcount > 0
