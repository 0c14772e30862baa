# -*- coding: utf-8 -*-
"""Water intake — DB storage helpers."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..timeutil import day_window, utc_now_iso
from .models import WaterIntake, WaterIntakeCreateRequest


def create_water_intake(user_id: str, request: WaterIntakeCreateRequest, db_path: Path | None = None) -> WaterIntake:
    intake_id = str(uuid4())
    now = utc_now_iso()
    with db_conn(db_path or settings.app_db_path) as conn:
        conn.execute(
            "INSERT INTO water_intake (id, user_id, date, amount, created_at) VALUES (?, ?, ?, ?, ?)",
            (intake_id, user_id, request.date, request.amount, now),
        )
    return WaterIntake(id=intake_id, user_id=user_id, date=request.date, amount=request.amount, created_at=now)


def get_water_intake(user_id: str, day: datetime | str, db_path: Path | None = None) -> List[WaterIntake]:
    """Water records on the local calendar day of ``day``, in insertion order."""
    start, end = day_window(day)
    with db_conn(db_path or settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM water_intake WHERE user_id = ? AND date >= ? AND date < ? ORDER BY rowid ASC",
            (user_id, start, end),
        ).fetchall()
    return [WaterIntake.model_validate(dict(r)) for r in rows]
