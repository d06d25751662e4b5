import unittest
from unittest.mock import MagicMock

from finboard.core import charts
from finboard.tests.helpers import make_supabase_mock

INCOMES = [
    {"amount": 100.0, "category": "Salary", "date": "2025-05-03T10:00:00+00:00"},
]
EXPENSES = [
    {"amount": 30.0, "category": "Food", "date": "2025-05-10T10:00:00+00:00"},
    {"amount": 20.0, "category": "Stock Consumption", "date": "2025-05-12T10:00:00+00:00"},
    {"amount": 10.0, "category": "Transport", "date": "2025-06-01T10:00:00Z"},
]


class TestMonthlyBalanceFrame(unittest.TestCase):
    def test_balance_ignores_stock_consumption(self):
        frame = charts.monthly_balance_frame(INCOMES, EXPENSES)
        self.assertEqual(list(frame.index), ["2025-05", "2025-06"])
        self.assertEqual(frame.loc["2025-05", "Income"], 100.0)
        self.assertEqual(frame.loc["2025-05", "Expenses"], 50.0)
        self.assertEqual(frame.loc["2025-05", "Balance"], 70.0)
        self.assertEqual(frame.loc["2025-06", "Income"], 0.0)
        self.assertEqual(frame.loc["2025-06", "Balance"], -10.0)

    def test_empty(self):
        self.assertTrue(charts.monthly_balance_frame([], []).empty)


class TestChartImages(unittest.TestCase):
    def setUp(self):
        self.supabase_client, self.table, _ = make_supabase_mock()

    def test_no_data_means_no_chart(self):
        self.assertIsNone(charts.generate_balance_chart(self.supabase_client))
        self.assertIsNone(charts.generate_stock_chart(self.supabase_client))

    def test_balance_chart_is_png(self):
        self.table.execute.side_effect = [MagicMock(data=INCOMES), MagicMock(data=EXPENSES)]
        buf = charts.generate_balance_chart(self.supabase_client)
        self.assertTrue(buf.getvalue().startswith(b"\x89PNG"))

    def test_stock_chart_is_png(self):
        self.table.execute.return_value.data = [
            {"name": "Coffee", "stock_quantity": 30.0, "cost_per_unit": 2.0, "price_per_unit": 6.0},
            {"name": "Tea", "stock_quantity": 5.0, "cost_per_unit": 1.0, "price_per_unit": 3.0},
        ]
        buf = charts.generate_stock_chart(self.supabase_client)
        self.assertTrue(buf.getvalue().startswith(b"\x89PNG"))


if __name__ == "__main__":
    unittest.main()
