# -*- coding: utf-8 -*-
"""Dashboard domain (derived statistics over a user's logged records).

The aggregators take the store as an explicit argument so they can run
against the SQLite app database or any object implementing ``StatsSource``.
"""

from .analytics import compute_workout_analytics
from .stats import StatsSource, UserNotFoundError, compute_dashboard_stats
from .store import SqliteStore

__all__ = [
    "SqliteStore",
    "StatsSource",
    "UserNotFoundError",
    "compute_dashboard_stats",
    "compute_workout_analytics",
]
