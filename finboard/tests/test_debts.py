import unittest
from unittest.mock import MagicMock

from finboard.core import debts
from finboard.core.errors import ValidationError
from finboard.core.models import CATEGORY_DEBT_COLLECTION, CATEGORY_DEBT_PAYMENT, DebtPaymentRequest
from finboard.tests.helpers import batch_operations, make_supabase_mock


def make_debt(**overrides):
    debt = {"id": "d1", "person_name": "Ana", "amount": 50.0, "amount_paid": 20.0,
            "direction": "owed_to_me", "status": "pending"}
    debt.update(overrides)
    return debt


class TestPayDebt(unittest.TestCase):
    def setUp(self):
        self.supabase_client, self.table, self.rpc = make_supabase_mock()

    def test_collecting_the_rest_marks_paid_and_records_income(self):
        self.table.execute.return_value.data = [make_debt()]

        result = debts.pay_debt(self.supabase_client, DebtPaymentRequest(debt_id="d1", payment=30))

        debt_update, income = batch_operations(self.supabase_client)
        self.assertEqual(debt_update["values"], {"amount_paid": 50.0, "status": "paid"})
        self.assertEqual(income["table"], "incomes")
        self.assertEqual(income["values"]["amount"], 30)
        self.assertEqual(income["values"]["category"], CATEGORY_DEBT_COLLECTION)
        self.assertEqual(result["status"], "paid")
        self.assertEqual(result["remaining"], 0)

    def test_paying_what_i_owe_records_expense(self):
        self.table.execute.return_value.data = [make_debt(direction="owed_by_me", amount_paid=0)]

        result = debts.pay_debt(self.supabase_client, DebtPaymentRequest(debt_id="d1", payment=10))

        debt_update, expense = batch_operations(self.supabase_client)
        self.assertEqual(debt_update["values"], {"amount_paid": 10.0, "status": "pending"})
        self.assertEqual(expense["table"], "expenses")
        self.assertEqual(expense["values"]["category"], CATEGORY_DEBT_PAYMENT)
        self.assertEqual(expense["values"]["description"], "Paid $10.00 to Ana")
        self.assertEqual(result["remaining"], 40.0)

    def test_overpayment_is_rejected(self):
        self.table.execute.return_value.data = [make_debt()]
        with self.assertRaises(ValidationError) as ctx:
            debts.pay_debt(self.supabase_client, DebtPaymentRequest(debt_id="d1", payment=30.01))
        self.assertEqual(str(ctx.exception), "Payment exceeds debt amount")
        self.supabase_client.rpc.assert_not_called()

    def test_non_positive_payment_is_rejected(self):
        self.table.execute.return_value.data = [make_debt()]
        for payment in (0, -10):
            with self.assertRaises(ValidationError):
                debts.pay_debt(self.supabase_client, DebtPaymentRequest(debt_id="d1", payment=payment))
        self.supabase_client.rpc.assert_not_called()

    def test_cents_do_not_overflow(self):
        self.table.execute.return_value.data = [make_debt(amount=0.3, amount_paid=0.1)]
        result = debts.pay_debt(self.supabase_client, DebtPaymentRequest(debt_id="d1", payment=0.2))
        self.assertEqual(result["status"], "paid")

    def test_fraction_of_a_cent_on_settled_debt_is_rejected(self):
        self.table.execute.return_value.data = [make_debt(amount_paid=50.0, status="paid")]
        with self.assertRaises(ValidationError):
            debts.pay_debt(self.supabase_client, DebtPaymentRequest(debt_id="d1", payment=0.004))
        self.supabase_client.rpc.assert_not_called()

    def test_payment_is_recorded_in_cents(self):
        self.table.execute.return_value.data = [make_debt()]
        result = debts.pay_debt(self.supabase_client, DebtPaymentRequest(debt_id="d1", payment=10.004))
        debt_update, income = batch_operations(self.supabase_client)
        self.assertEqual(income["values"]["amount"], 10.0)
        self.assertEqual(debt_update["values"]["amount_paid"], 30.0)
        self.assertEqual(result["remaining"], 20.0)

    def test_payment_rounding_past_the_debt_is_rejected(self):
        self.table.execute.return_value.data = [make_debt()]
        with self.assertRaises(ValidationError) as ctx:
            debts.pay_debt(self.supabase_client, DebtPaymentRequest(debt_id="d1", payment=30.006))
        self.assertEqual(str(ctx.exception), "Payment exceeds debt amount")


class TestDebtCrud(unittest.TestCase):
    def setUp(self):
        self.supabase_client, self.table, _ = make_supabase_mock()

    def test_add_debt_starts_pending(self):
        debts.add_debt(self.supabase_client, {"person_name": "Caio", "amount": "100", "direction": "owed_by_me"})
        args, _ = self.table.insert.call_args
        self.assertEqual(args[0]["amount_paid"], 0.0)
        self.assertEqual(args[0]["status"], "pending")
        self.assertEqual(args[0]["direction"], "owed_by_me")
        self.assertIsNone(args[0]["due_date"])

    def test_add_debt_requires_direction(self):
        with self.assertRaises(ValidationError):
            debts.add_debt(self.supabase_client, {"person_name": "Caio", "amount": 100})

    def test_update_cannot_go_below_amount_paid(self):
        self.table.execute.return_value.data = [make_debt()]
        with self.assertRaises(ValidationError):
            debts.update_debt(self.supabase_client, "d1", {"person_name": "Ana", "amount": 10})
        self.table.update.assert_not_called()

    def test_update_rederives_status(self):
        self.table.execute.side_effect = [
            MagicMock(data=[make_debt()]),
            MagicMock(data=[make_debt(amount=20.0, status="paid")]),
        ]
        debts.update_debt(self.supabase_client, "d1", {"person_name": "Ana", "amount": 20})
        args, _ = self.table.update.call_args
        self.assertEqual(args[0]["status"], "paid")


class TestSummarizeDebts(unittest.TestCase):
    def test_totals_per_direction(self):
        rows = [
            make_debt(),
            make_debt(id="d2", amount=100.0, amount_paid=100.0, status="paid"),
            make_debt(id="d3", direction="owed_by_me", amount=40.0, amount_paid=10.0),
        ]
        summary = debts.summarize_debts(rows)
        self.assertEqual(summary["owed_to_me"], {"total": 150.0, "paid": 120.0, "remaining": 30.0})
        self.assertEqual(summary["owed_by_me"], {"total": 40.0, "paid": 10.0, "remaining": 30.0})
        self.assertEqual(summary["pending_count"], 2)
        self.assertEqual(debts.remaining(rows[0]), 30.0)


if __name__ == "__main__":
    unittest.main()
