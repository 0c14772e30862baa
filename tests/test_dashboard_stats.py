# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from datetime import datetime, timedelta
from pathlib import Path
from typing import List

from fittrack.app_db import init_app_db
from fittrack.auth.storage import create_user
from fittrack.dashboard import SqliteStore, UserNotFoundError, compute_dashboard_stats
from fittrack.meals.models import FoodItemCreate, MealCreateRequest
from fittrack.meals.storage import compute_totals, create_meal
from fittrack.measurements.models import MeasurementCreateRequest
from fittrack.measurements.storage import create_measurement
from fittrack.water.models import WaterIntakeCreateRequest
from fittrack.water.storage import create_water_intake
from fittrack.workouts.models import Workout, WorkoutCreateRequest
from fittrack.workouts.storage import create_workout

from fake_store import NOW, USER_ID, FakeStore, make_user


class TestMealTotals(unittest.TestCase):
    def test_single_food_item(self) -> None:
        totals = compute_totals([FoodItemCreate(name="chicken", quantity=100, calories_per_gram=1.65, protein_per_gram=0.31)])
        self.assertEqual(totals.total_calories, 165)
        self.assertEqual(totals.total_protein, 31.0)
        self.assertEqual(totals.total_carbs, 0.0)
        self.assertEqual(totals.total_fat, 0.0)

    def test_sums_items_and_rounds(self) -> None:
        items = [
            FoodItemCreate(name="rice", quantity=150, calories_per_gram=1.3, carbs_per_gram=0.28, protein_per_gram=0.02),
            FoodItemCreate(name="oil", quantity=10, calories_per_gram=8.84, fat_per_gram=1.0),
        ]
        totals = compute_totals(items)
        self.assertEqual(totals.total_calories, 283)
        self.assertEqual(totals.total_carbs, 42.0)
        self.assertEqual(totals.total_protein, 3.0)
        self.assertEqual(totals.total_fat, 10.0)

    def test_half_calorie_rounds_up(self) -> None:
        totals = compute_totals([FoodItemCreate(name="broth", quantity=5, calories_per_gram=0.5)])
        self.assertEqual(totals.total_calories, 3)

    def test_no_items(self) -> None:
        totals = compute_totals([])
        self.assertEqual(totals.total_calories, 0)
        self.assertEqual(totals.total_protein, 0.0)


class TestDashboardStats(unittest.TestCase):
    def test_empty_user_gets_zeros_and_default_goals(self) -> None:
        snap = compute_dashboard_stats(FakeStore(make_user()), USER_ID, now=NOW)
        self.assertEqual(snap.today_calories, 0)
        self.assertEqual(snap.today_protein, 0)
        self.assertEqual(snap.today_carbs, 0)
        self.assertEqual(snap.today_fat, 0)
        self.assertEqual(snap.today_water, 0)
        self.assertEqual(snap.weekly_workouts, 0)
        self.assertEqual(snap.total_workouts, 0)
        self.assertIsNone(snap.current_weight)
        self.assertEqual(snap.recent_workouts, [])
        self.assertEqual(snap.goals.calories, 2200)
        self.assertEqual(snap.goals.protein, 120)
        self.assertEqual(snap.goals.carbs, 250)
        self.assertEqual(snap.goals.fat, 75)

    def test_zero_goals_fall_back_to_defaults(self) -> None:
        user = make_user(daily_calorie_goal=0, daily_protein_goal=None, daily_carb_goal=300, daily_fat_goal=60)
        snap = compute_dashboard_stats(FakeStore(user), USER_ID, now=NOW)
        self.assertEqual(snap.goals.calories, 2200)
        self.assertEqual(snap.goals.protein, 120)
        self.assertEqual(snap.goals.carbs, 300)
        self.assertEqual(snap.goals.fat, 60)

    def test_only_todays_meals_are_summed(self) -> None:
        store = FakeStore(make_user())
        store.add_meal(datetime(2026, 10, 19, 0, 0), 400, protein=12.3, carbs=40.0, fat=10.0)
        store.add_meal(datetime(2026, 10, 19, 20, 0), 700, protein=7.4, carbs=80.5, fat=25.2)
        store.add_meal(datetime(2026, 10, 18, 23, 59, 59), 999, protein=99.0)
        store.add_meal(datetime(2026, 10, 20, 0, 0), 888, protein=88.0)

        snap = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertEqual(snap.today_calories, 1100)
        self.assertEqual(snap.today_protein, 19.7)
        self.assertEqual(snap.today_carbs, 120.5)
        self.assertEqual(snap.today_fat, 35.2)
        self.assertAlmostEqual(snap.goal_progress.calories, 0.5)

    def test_water_is_summed_and_rounded(self) -> None:
        store = FakeStore(make_user())
        store.add_water(datetime(2026, 10, 19, 8, 0), 0.25)
        store.add_water(datetime(2026, 10, 19, 12, 0), 0.25)
        store.add_water(datetime(2026, 10, 19, 18, 0), 0.3)
        store.add_water(datetime(2026, 10, 18, 18, 0), 2.0)

        snap = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertEqual(snap.today_water, 0.8)

    def test_single_glass_of_water_rounds_half_up(self) -> None:
        store = FakeStore(make_user())
        store.add_water(datetime(2026, 10, 19, 9, 0), 0.25)

        snap = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertEqual(snap.today_water, 0.3)

    def test_macros_and_progress_round_half_up(self) -> None:
        store = FakeStore(make_user(daily_calorie_goal=2000))
        store.add_meal(datetime(2026, 10, 19, 8, 0), 1, protein=0.25, carbs=0.35, fat=2.45)

        snap = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertEqual(snap.today_protein, 0.3)
        self.assertEqual(snap.today_carbs, 0.4)
        self.assertEqual(snap.today_fat, 2.5)
        # 1 / 2000 = 0.0005
        self.assertEqual(snap.goal_progress.calories, 0.001)

    def test_weekly_is_a_rolling_window(self) -> None:
        store = FakeStore(make_user())
        store.add_workout(NOW - timedelta(days=10))
        store.add_workout(NOW - timedelta(days=2))

        snap = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertEqual(snap.weekly_workouts, 1)
        self.assertEqual(snap.total_workouts, 2)

    def test_weekly_window_includes_its_start(self) -> None:
        store = FakeStore(make_user())
        store.add_workout(NOW - timedelta(days=7))
        store.add_workout(NOW - timedelta(days=7, seconds=1))

        snap = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertEqual(snap.weekly_workouts, 1)
        self.assertLessEqual(snap.weekly_workouts, snap.total_workouts)

    def test_recent_workouts_newest_first_ties_in_insertion_order(self) -> None:
        store = FakeStore(make_user())
        store.add_workout(NOW - timedelta(days=20), name="old")
        same_day = NOW - timedelta(days=1)
        store.add_workout(same_day, name="a")
        store.add_workout(same_day, name="b")
        store.add_workout(NOW - timedelta(days=5), name="mid")
        store.add_workout(same_day, name="c")

        snap = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertEqual([w.name for w in snap.recent_workouts], ["a", "b", "c"])
        self.assertEqual(snap.total_workouts, 5)

    def test_recent_workouts_shorter_than_three(self) -> None:
        store = FakeStore(make_user())
        store.add_workout(NOW - timedelta(days=3), name="first")
        store.add_workout(NOW - timedelta(days=1), name="second")

        snap = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertEqual([w.name for w in snap.recent_workouts], ["second", "first"])

    def test_current_weight_from_latest_measurement(self) -> None:
        store = FakeStore(make_user())
        store.add_measurement(NOW - timedelta(days=30), 82.0)
        store.add_measurement(NOW - timedelta(days=1), 80.4)
        store.add_measurement(NOW - timedelta(days=10), 81.1)

        snap = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertEqual(snap.current_weight, 80.4)

    def test_latest_measurement_without_weight_is_absent(self) -> None:
        store = FakeStore(make_user())
        store.add_measurement(NOW - timedelta(days=30), 82.0)
        store.add_measurement(NOW - timedelta(days=1), None)

        snap = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertIsNone(snap.current_weight)

    def test_unknown_user(self) -> None:
        with self.assertRaises(UserNotFoundError):
            compute_dashboard_stats(FakeStore(None), USER_ID, now=NOW)

    def test_store_failure_propagates(self) -> None:
        class BrokenStore(FakeStore):
            def get_workouts(self, user_id: str) -> List[Workout]:
                raise RuntimeError("db down")

        with self.assertRaises(RuntimeError):
            compute_dashboard_stats(BrokenStore(make_user()), USER_ID, now=NOW)

    def test_records_are_not_mutated(self) -> None:
        store = FakeStore(make_user())
        for days in (4, 1, 2, 3):
            store.add_workout(NOW - timedelta(days=days), name=f"d{days}")
        before = [w.model_dump() for w in store.workouts]

        first = compute_dashboard_stats(store, USER_ID, now=NOW)
        second = compute_dashboard_stats(store, USER_ID, now=NOW)
        self.assertEqual([w.model_dump() for w in store.workouts], before)
        self.assertEqual(first, second)


class TestDashboardStatsSqlite(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="fittrack-test-"))
        self.db_path = self._tmp / "fittrack.db"
        init_app_db(self.db_path)
        self.user = create_user(
            username="sam",
            email="Sam@Example.com",
            password_hash="x",
            first_name="Sam",
            last_name="Lee",
            db_path=self.db_path,
        )
        self.store = SqliteStore(self.db_path)

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp, ignore_errors=True)

    def test_snapshot_from_sqlite_records(self) -> None:
        uid = self.user["id"]
        create_meal(
            uid,
            MealCreateRequest(
                name="Chicken",
                type="lunch",
                date="2026-10-19T12:15:00",
                food_items=[FoodItemCreate(name="chicken", quantity=100, calories_per_gram=1.65, protein_per_gram=0.31)],
            ),
            db_path=self.db_path,
        )
        create_meal(
            uid,
            MealCreateRequest(name="Late snack", type="snack", date="2026-10-18T23:30:00", total_calories=300),
            db_path=self.db_path,
        )
        create_water_intake(uid, WaterIntakeCreateRequest(date="2026-10-19", amount=1.5), db_path=self.db_path)
        create_workout(
            uid,
            WorkoutCreateRequest(name="Run", type="cardio", date=(NOW - timedelta(days=2)).isoformat()),
            db_path=self.db_path,
        )
        create_workout(
            uid,
            WorkoutCreateRequest(name="Lift", type="strength", date=(NOW - timedelta(days=10)).isoformat()),
            db_path=self.db_path,
        )
        create_measurement(uid, MeasurementCreateRequest(date="2026-10-10", weight=78.5), db_path=self.db_path)

        snap = compute_dashboard_stats(self.store, uid, now=NOW)
        self.assertEqual(snap.today_calories, 165)
        self.assertEqual(snap.today_protein, 31.0)
        self.assertEqual(snap.today_water, 1.5)
        self.assertEqual(snap.weekly_workouts, 1)
        self.assertEqual(snap.total_workouts, 2)
        self.assertEqual([w.name for w in snap.recent_workouts], ["Run", "Lift"])
        self.assertEqual(snap.current_weight, 78.5)
        self.assertEqual(snap.goals.calories, 2200)

    def test_unknown_user(self) -> None:
        with self.assertRaises(UserNotFoundError):
            compute_dashboard_stats(self.store, "missing", now=NOW)


if __name__ == "__main__":
    unittest.main()
