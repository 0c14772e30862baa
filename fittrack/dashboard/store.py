# -*- coding: utf-8 -*-
"""SQLite-backed ``StatsSource`` over the app database."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..auth import storage as users
from ..config import settings
from ..meals import storage as meals
from ..meals.models import Meal
from ..measurements import storage as measurements
from ..measurements.models import BodyMeasurement
from ..water import storage as water
from ..water.models import WaterIntake
from ..workouts import storage as workouts
from ..workouts.models import Workout


class SqliteStore:
    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path or settings.app_db_path

    def get_meals_by_date(self, user_id: str, day: datetime) -> List[Meal]:
        return meals.get_meals_by_date(user_id, day, db_path=self.db_path)

    def get_water_intake(self, user_id: str, day: datetime) -> List[WaterIntake]:
        return water.get_water_intake(user_id, day, db_path=self.db_path)

    def get_workouts(self, user_id: str) -> List[Workout]:
        return workouts.get_workouts(user_id, db_path=self.db_path)

    def get_latest_body_measurement(self, user_id: str) -> Optional[BodyMeasurement]:
        return measurements.get_latest_body_measurement(user_id, db_path=self.db_path)

    def count_body_measurements(self, user_id: str) -> int:
        return measurements.count_body_measurements(user_id, db_path=self.db_path)

    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        return users.get_user_by_id(user_id, db_path=self.db_path)


def get_store() -> SqliteStore:
    """FastAPI dependency; overridable in tests via ``app.dependency_overrides``."""
    return SqliteStore(settings.app_db_path)
