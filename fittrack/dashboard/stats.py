# -*- coding: utf-8 -*-
"""Dashboard stats aggregation.

Given one user's logged records, computes the snapshot the dashboard renders:
- today's nutrition totals (from stored meal totals, not food items)
- today's water intake
- rolling 7-day and all-time workout counts, plus the 3 most recent workouts
- latest body weight
- daily goals (system defaults when unset) and progress towards them
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Protocol, Sequence

from ..auth.storage import DEFAULT_GOALS
from ..meals.models import Meal
from ..rounding import round_half_up
from ..measurements.models import BodyMeasurement
from ..timeutil import local_now, parse_datetime, start_of_day, to_local_naive
from ..water.models import WaterIntake
from ..workouts.models import Workout
from .models import DashboardSnapshot, GoalProgress, Goals

logger = logging.getLogger(__name__)

RECENT_WORKOUT_COUNT = 3
WEEKLY_WINDOW = timedelta(days=7)


class UserNotFoundError(LookupError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class StatsSource(Protocol):
    """Read-only persistence the aggregators depend on."""

    def get_meals_by_date(self, user_id: str, day: datetime) -> List[Meal]: ...

    def get_water_intake(self, user_id: str, day: datetime) -> List[WaterIntake]: ...

    def get_workouts(self, user_id: str) -> List[Workout]: ...

    def get_latest_body_measurement(self, user_id: str) -> Optional[BodyMeasurement]: ...

    def count_body_measurements(self, user_id: str) -> int: ...

    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]: ...


def resolve_now(now: Optional[datetime]) -> datetime:
    return to_local_naive(now) if now is not None else local_now()


def require_user(store: StatsSource, user_id: str) -> Dict[str, Any]:
    user = store.get_user(user_id)
    if not user:
        logger.info("Stats requested for unknown user %s", user_id)
        raise UserNotFoundError(user_id)
    return user


def workout_time(workout: Workout) -> datetime:
    return parse_datetime(workout.date) or datetime.min


def count_since(workouts: Sequence[Workout], since: datetime) -> int:
    return sum(1 for w in workouts if workout_time(w) >= since)


def most_recent(workouts: Sequence[Workout], limit: int = RECENT_WORKOUT_COUNT) -> List[Workout]:
    # sorted() is stable with reverse=True, so equal dates keep insertion order.
    return sorted(workouts, key=workout_time, reverse=True)[:limit]


def goals_for(user: Dict[str, Any]) -> Goals:
    # Unset or zero goals fall back to the defaults.
    return Goals(
        calories=int(user.get("daily_calorie_goal") or DEFAULT_GOALS["daily_calorie_goal"]),
        protein=int(user.get("daily_protein_goal") or DEFAULT_GOALS["daily_protein_goal"]),
        carbs=int(user.get("daily_carb_goal") or DEFAULT_GOALS["daily_carb_goal"]),
        fat=int(user.get("daily_fat_goal") or DEFAULT_GOALS["daily_fat_goal"]),
    )


def _ratio(value: float, goal: int) -> float:
    return round_half_up(value / goal, 3) if goal else 0.0


def compute_dashboard_stats(store: StatsSource, user_id: str, now: Optional[datetime] = None) -> DashboardSnapshot:
    """Build the dashboard snapshot for ``user_id`` as of ``now`` (default: current local time).

    Raises UserNotFoundError when the user has no profile. Any other store
    failure propagates unchanged. Nothing is written.
    """
    now = resolve_now(now)
    today = start_of_day(now)

    # Independent reads; all of them complete before the snapshot is assembled.
    user = require_user(store, user_id)
    meals = store.get_meals_by_date(user_id, today)
    water = store.get_water_intake(user_id, today)
    workouts = store.get_workouts(user_id)
    latest = store.get_latest_body_measurement(user_id)

    calories = sum(int(m.total_calories or 0) for m in meals)
    protein = round_half_up(sum(m.total_protein or 0.0 for m in meals), 1)
    carbs = round_half_up(sum(m.total_carbs or 0.0 for m in meals), 1)
    fat = round_half_up(sum(m.total_fat or 0.0 for m in meals), 1)
    water_total = round_half_up(sum(w.amount for w in water), 1)

    goals = goals_for(user)
    return DashboardSnapshot(
        today_calories=calories,
        today_protein=protein,
        today_carbs=carbs,
        today_fat=fat,
        today_water=water_total,
        weekly_workouts=count_since(workouts, now - WEEKLY_WINDOW),
        total_workouts=len(workouts),
        current_weight=latest.weight if latest is not None else None,
        goals=goals,
        goal_progress=GoalProgress(
            calories=_ratio(calories, goals.calories),
            protein=_ratio(protein, goals.protein),
            carbs=_ratio(carbs, goals.carbs),
            fat=_ratio(fat, goals.fat),
        ),
        recent_workouts=most_recent(workouts),
    )
