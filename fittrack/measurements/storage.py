# -*- coding: utf-8 -*-
"""Body measurements — DB storage helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..timeutil import utc_now_iso
from .models import BodyMeasurement, MeasurementCreateRequest, MeasurementValues

_VALUE_COLUMNS = tuple(MeasurementValues.model_fields)


def _row_to_measurement(row: Dict) -> BodyMeasurement:
    return BodyMeasurement(
        id=row["id"],
        user_id=row["user_id"],
        date=row["date"],
        created_at=row["created_at"],
        **{k: row.get(k) for k in _VALUE_COLUMNS},
    )


def create_measurement(user_id: str, request: MeasurementCreateRequest, db_path: Path | None = None) -> BodyMeasurement:
    measurement_id = str(uuid4())
    now = utc_now_iso()
    values = {k: getattr(request, k) for k in _VALUE_COLUMNS}
    columns = ", ".join(_VALUE_COLUMNS)
    placeholders = ", ".join("?" for _ in _VALUE_COLUMNS)
    with db_conn(db_path or settings.app_db_path) as conn:
        conn.execute(
            f"INSERT INTO body_measurements (id, user_id, date, {columns}, created_at) "
            f"VALUES (?, ?, ?, {placeholders}, ?)",
            (measurement_id, user_id, request.date, *values.values(), now),
        )
    return BodyMeasurement(id=measurement_id, user_id=user_id, date=request.date, created_at=now, **values)


def get_body_measurements(user_id: str, db_path: Path | None = None) -> List[BodyMeasurement]:
    """Newest first; equal dates keep insertion order."""
    with db_conn(db_path or settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM body_measurements WHERE user_id = ? ORDER BY date DESC, rowid ASC",
            (user_id,),
        ).fetchall()
    return [_row_to_measurement(dict(r)) for r in rows]


def get_latest_body_measurement(user_id: str, db_path: Path | None = None) -> Optional[BodyMeasurement]:
    with db_conn(db_path or settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM body_measurements WHERE user_id = ? ORDER BY date DESC, rowid ASC LIMIT 1",
            (user_id,),
        ).fetchone()
    return _row_to_measurement(dict(row)) if row else None


def delete_measurement(user_id: str, measurement_id: str, db_path: Path | None = None) -> bool:
    with db_conn(db_path or settings.app_db_path) as conn:
        cur = conn.execute(
            "DELETE FROM body_measurements WHERE id = ? AND user_id = ?",
            (measurement_id, user_id),
        )
        return cur.rowcount > 0


def count_body_measurements(user_id: str, db_path: Path | None = None) -> int:
    with db_conn(db_path or settings.app_db_path) as conn:
        row = conn.execute("SELECT COUNT(*) FROM body_measurements WHERE user_id = ?", (user_id,)).fetchone()
    return int(row[0])
