# -*- coding: utf-8 -*-
"""Auth — DB storage helpers for the users table."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..timeutil import utc_now_iso

DEFAULT_GOALS: Dict[str, int] = {
    "daily_calorie_goal": 2200,
    "daily_protein_goal": 120,
    "daily_carb_goal": 250,
    "daily_fat_goal": 75,
}

_UPDATABLE_COLUMNS = (
    "username",
    "email",
    "first_name",
    "last_name",
    "dietary_preference",
    "daily_calorie_goal",
    "daily_protein_goal",
    "daily_carb_goal",
    "daily_fat_goal",
)


def get_user_by_email(email: str, db_path: Path | None = None) -> Optional[Dict[str, Any]]:
    with db_conn(db_path or settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (email.lower().strip(),)).fetchone()
        return dict(row) if row else None


def get_user_by_username(username: str, db_path: Path | None = None) -> Optional[Dict[str, Any]]:
    with db_conn(db_path or settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE username = ?", (username.strip(),)).fetchone()
        return dict(row) if row else None


def get_user_by_id(user_id: str, db_path: Path | None = None) -> Optional[Dict[str, Any]]:
    with db_conn(db_path or settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return dict(row) if row else None


def create_user(
    *,
    username: str,
    email: str,
    password_hash: str,
    first_name: str,
    last_name: str,
    dietary_preference: str = "omnivore",
    goals: Optional[Dict[str, Optional[int]]] = None,
    db_path: Path | None = None,
) -> Dict[str, Any]:
    user_id = str(uuid4())
    now = utc_now_iso()
    email_norm = email.lower().strip()
    # Unset (or zero) goals fall back to the system defaults.
    resolved = {k: (goals or {}).get(k) or v for k, v in DEFAULT_GOALS.items()}
    row = {
        "id": user_id,
        "username": username.strip(),
        "email": email_norm,
        "password_hash": password_hash,
        "first_name": first_name,
        "last_name": last_name,
        "dietary_preference": dietary_preference or "omnivore",
        **resolved,
        "created_at": now,
    }
    with db_conn(db_path or settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO users (
                id, username, email, password_hash, first_name, last_name, dietary_preference,
                daily_calorie_goal, daily_protein_goal, daily_carb_goal, daily_fat_goal, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                row["id"],
                row["username"],
                row["email"],
                row["password_hash"],
                row["first_name"],
                row["last_name"],
                row["dietary_preference"],
                row["daily_calorie_goal"],
                row["daily_protein_goal"],
                row["daily_carb_goal"],
                row["daily_fat_goal"],
                row["created_at"],
            ),
        )
    return row


def update_user(user_id: str, updates: Dict[str, Any], db_path: Path | None = None) -> Optional[Dict[str, Any]]:
    """Apply a partial update; keys that are not updatable columns or are None are ignored."""
    fields = {k: v for k, v in updates.items() if k in _UPDATABLE_COLUMNS and v is not None}
    if "email" in fields:
        fields["email"] = str(fields["email"]).lower().strip()
    with db_conn(db_path or settings.app_db_path) as conn:
        if fields:
            assignments = ", ".join(f"{k} = ?" for k in fields)
            conn.execute(
                f"UPDATE users SET {assignments} WHERE id = ?",
                (*fields.values(), user_id),
            )
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return dict(row) if row else None
