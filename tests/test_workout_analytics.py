# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone

from fittrack.dashboard import UserNotFoundError, compute_workout_analytics
from fittrack.rounding import round_half_up, round_to_int
from fittrack.timeutil import day_window, months_before, normalize_timestamp, parse_datetime

from fake_store import NOW, USER_ID, FakeStore, make_user


class TestWorkoutAnalytics(unittest.TestCase):
    def test_empty(self) -> None:
        stats = compute_workout_analytics(FakeStore(make_user()), USER_ID, now=NOW)
        self.assertEqual(stats.weekly_workouts, 0)
        self.assertEqual(stats.monthly_workouts, 0)
        self.assertEqual(stats.total_workouts, 0)
        self.assertEqual(stats.total_calories_burned, 0)
        self.assertEqual(stats.average_duration, 0)
        self.assertEqual(stats.average_calories_burned, 0)
        self.assertEqual(stats.body_measurements, 0)
        self.assertEqual(stats.by_type, {"strength": 0, "cardio": 0, "flexibility": 0, "sports": 0})

    def test_counts_and_totals(self) -> None:
        store = FakeStore(make_user())
        store.add_workout(NOW - timedelta(days=2), type="cardio", duration=30, calories_burned=300)
        store.add_workout(NOW - timedelta(days=20), type="strength", duration=45, calories_burned=250)
        store.add_workout(NOW - timedelta(days=40), type="strength", duration=50)
        store.add_workout(NOW - timedelta(days=1), type="flexibility")
        store.add_measurement(NOW - timedelta(days=3), 80.0)
        store.add_measurement(NOW - timedelta(days=90), None)

        stats = compute_workout_analytics(store, USER_ID, now=NOW)
        self.assertEqual(stats.weekly_workouts, 2)
        self.assertEqual(stats.monthly_workouts, 3)
        self.assertEqual(stats.total_workouts, 4)
        self.assertEqual(stats.total_calories_burned, 550)
        # (30 + 45 + 50 + 0) / 4 = 31.25
        self.assertEqual(stats.average_duration, 31)
        # 550 / 4 = 137.5
        self.assertEqual(stats.average_calories_burned, 138)
        self.assertEqual(stats.body_measurements, 2)
        self.assertEqual(stats.by_type, {"strength": 2, "cardio": 1, "flexibility": 1, "sports": 0})
        self.assertLessEqual(stats.weekly_workouts, stats.monthly_workouts)
        self.assertLessEqual(stats.monthly_workouts, stats.total_workouts)

    def test_average_duration_rounds_half_up(self) -> None:
        store = FakeStore(make_user())
        store.add_workout(NOW - timedelta(days=1), duration=30, calories_burned=101)
        store.add_workout(NOW - timedelta(days=2), duration=45, calories_burned=200)

        stats = compute_workout_analytics(store, USER_ID, now=NOW)
        self.assertEqual(stats.average_duration, 38)
        self.assertEqual(stats.average_calories_burned, 151)

    def test_month_window_is_calendar_based(self) -> None:
        now = datetime(2026, 3, 31, 9, 0)
        store = FakeStore(make_user())
        store.add_workout(datetime(2026, 2, 28, 9, 0))
        store.add_workout(datetime(2026, 2, 28, 8, 59))

        stats = compute_workout_analytics(store, USER_ID, now=now)
        self.assertEqual(stats.monthly_workouts, 1)

    def test_unknown_user(self) -> None:
        with self.assertRaises(UserNotFoundError):
            compute_workout_analytics(FakeStore(None), USER_ID, now=NOW)


class TestRounding(unittest.TestCase):
    def test_halves_round_up(self) -> None:
        self.assertEqual(round_to_int(2.5), 3)
        self.assertEqual(round_to_int(0.5), 1)
        self.assertEqual(round_to_int(2.4999), 2)
        self.assertEqual(round_half_up(0.25, 1), 0.3)
        self.assertEqual(round_half_up(0.15, 1), 0.2)
        self.assertEqual(round_half_up(0.0005, 3), 0.001)

    def test_float_noise_is_ignored(self) -> None:
        self.assertEqual(round_half_up(0.1 + 0.2, 1), 0.3)
        self.assertEqual(round_half_up(12.3 + 7.4, 1), 19.7)


class TestTimeHelpers(unittest.TestCase):
    def test_months_before_clamps_day(self) -> None:
        self.assertEqual(months_before(datetime(2026, 3, 31, 9, 0), 1), datetime(2026, 2, 28, 9, 0))
        self.assertEqual(months_before(datetime(2024, 3, 30), 1), datetime(2024, 2, 29))
        self.assertEqual(months_before(datetime(2026, 1, 15), 1), datetime(2025, 12, 15))

    def test_day_window(self) -> None:
        self.assertEqual(day_window("2026-10-19T15:30:00"), ("2026-10-19T00:00:00", "2026-10-20T00:00:00"))
        self.assertEqual(day_window(datetime(2026, 12, 31, 23, 59)), ("2026-12-31T00:00:00", "2027-01-01T00:00:00"))

    def test_normalize_timestamp(self) -> None:
        self.assertEqual(normalize_timestamp("2026-10-19"), "2026-10-19T00:00:00")
        self.assertEqual(normalize_timestamp("2026-10-19T07:05:09.123"), "2026-10-19T07:05:09")
        with self.assertRaises(ValueError):
            normalize_timestamp("yesterday")

    def test_aware_values_become_local_naive(self) -> None:
        aware = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        parsed = parse_datetime("2026-10-19T12:00:00Z")
        self.assertIsNotNone(parsed)
        self.assertIsNone(parsed.tzinfo)
        self.assertEqual(parsed, aware.astimezone().replace(tzinfo=None))


if __name__ == "__main__":
    unittest.main()
