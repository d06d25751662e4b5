import datetime
import unittest
from unittest.mock import MagicMock

from finboard.core import planner
from finboard.core.errors import ValidationError
from finboard.tests.helpers import make_supabase_mock


class TestMonthGrid(unittest.TestCase):
    def test_month_starting_on_sunday(self):
        grid = planner.month_grid(2025, 6)
        self.assertEqual(grid["days_in_month"], 30)
        self.assertEqual(grid["starting_day_of_week"], 0)

    def test_leap_february(self):
        grid = planner.month_grid(2024, 2)
        self.assertEqual(grid["days_in_month"], 29)
        self.assertEqual(grid["starting_day_of_week"], 4)

    def test_invalid_month(self):
        with self.assertRaises(ValidationError):
            planner.month_grid(2024, 13)

    def test_month_navigation(self):
        self.assertEqual(planner.previous_month(2025, 1), (2024, 12))
        self.assertEqual(planner.next_month(2025, 12), (2026, 1))
        self.assertEqual(planner.next_month(2025, 6), (2025, 7))


class TestEventsAndTasks(unittest.TestCase):
    def setUp(self):
        self.supabase_client, self.table, _ = make_supabase_mock()

    def test_events_for_date(self):
        events = [
            {"id": "e1", "date": "2025-06-04T10:00:00+00:00"},
            {"id": "e2", "date": "2025-06-05T10:00:00+00:00"},
        ]
        self.assertEqual(
            [e["id"] for e in planner.events_for_date(events, datetime.date(2025, 6, 4))],
            ["e1"],
        )

    def test_add_event_requires_title_and_date(self):
        with self.assertRaises(ValidationError):
            planner.add_event(self.supabase_client, {"title": "", "date": "2025-06-04"})
        with self.assertRaises(ValidationError):
            planner.add_event(self.supabase_client, {"title": "Dentist"})
        with self.assertRaises(ValidationError):
            planner.add_event(self.supabase_client, {"title": "Dentist", "date": "not a date"})

    def test_add_reminder_event(self):
        planner.add_event(self.supabase_client, {"title": "Dentist", "date": "2025-06-04", "is_reminder": True})
        args, _ = self.table.insert.call_args
        self.assertEqual(args[0]["title"], "Dentist")
        self.assertTrue(args[0]["is_reminder"])
        self.assertEqual(args[0]["date"], "2025-06-04T00:00:00+00:00")

    def test_toggle_task(self):
        self.table.execute.side_effect = [
            MagicMock(data=[{"id": "t1", "completed": False}]),
            MagicMock(data=[{"id": "t1", "completed": True}]),
        ]
        task = planner.toggle_task(self.supabase_client, "t1")
        self.assertTrue(task["completed"])
        self.table.update.assert_called_with({"completed": True})

    def test_split_tasks(self):
        pending, completed = planner.split_tasks([
            {"id": "t1", "completed": False},
            {"id": "t2", "completed": True},
            {"id": "t3"},
        ])
        self.assertEqual([t["id"] for t in pending], ["t1", "t3"])
        self.assertEqual([t["id"] for t in completed], ["t2"])


if __name__ == "__main__":
    unittest.main()
