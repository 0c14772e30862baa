# -*- coding: utf-8 -*-
"""Workout analytics: weekly/monthly counts, calories burned, averages per workout."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from ..rounding import round_to_int
from ..timeutil import months_before
from ..workouts.models import WorkoutType
from .models import WorkoutAnalytics
from .stats import WEEKLY_WINDOW, StatsSource, count_since, require_user, resolve_now


def compute_workout_analytics(store: StatsSource, user_id: str, now: Optional[datetime] = None) -> WorkoutAnalytics:
    now = resolve_now(now)
    require_user(store, user_id)
    workouts = store.get_workouts(user_id)
    measurement_count = store.count_body_measurements(user_id)

    by_type: Dict[str, int] = {t.value: 0 for t in WorkoutType}
    for w in workouts:
        by_type[WorkoutType(w.type).value] += 1

    # Missing duration or calories count as 0 in the averages.
    total_duration = sum(w.duration or 0 for w in workouts)
    total_calories = sum(w.calories_burned or 0 for w in workouts)
    count = len(workouts)

    return WorkoutAnalytics(
        weekly_workouts=count_since(workouts, now - WEEKLY_WINDOW),
        monthly_workouts=count_since(workouts, months_before(now, 1)),
        total_workouts=count,
        total_calories_burned=total_calories,
        average_duration=round_to_int(total_duration / count) if count else 0,
        average_calories_burned=round_to_int(total_calories / count) if count else 0,
        body_measurements=measurement_count,
        by_type=by_type,
    )
