# finboard/core/dashboard.py
from typing import Any, Dict
from supabase import Client

from finboard.core import db, debts, inventory, ledger
from finboard.core.models import DEBTS, EXPENSES, INCOMES, OWED_BY_ME, OWED_TO_ME, PRODUCTS


def get_dashboard_stats(supabase_client: Client) -> Dict[str, Any]:
    """Números dos cards do dashboard: saldo, estoque e dívidas."""
    wallet = ledger.summarize(
        db.list_rows(supabase_client, INCOMES, order_by="date"),
        db.list_rows(supabase_client, EXPENSES, order_by="date"),
    )
    stock = inventory.summarize_stock(db.list_rows(supabase_client, PRODUCTS))
    debt_summary = debts.summarize_debts(db.list_rows(supabase_client, DEBTS))

    return {
        "total_income": wallet["total_income"],
        "total_expenses": wallet["total_expenses"],
        "balance": wallet["balance"],
        "total_products": stock["total_products"],
        "total_stock_value": stock["total_stock_value"],
        "total_stock_cost": stock["total_cost"],
        "potential_profit": stock["total_profit"],
        "total_debt_to_others": debt_summary[OWED_BY_ME]["total"],
        "total_debt_to_others_paid": debt_summary[OWED_BY_ME]["paid"],
        "total_debt_to_others_remaining": debt_summary[OWED_BY_ME]["remaining"],
        "total_debt_to_me": debt_summary[OWED_TO_ME]["total"],
        "total_debt_to_me_paid": debt_summary[OWED_TO_ME]["paid"],
        "total_debt_to_me_remaining": debt_summary[OWED_TO_ME]["remaining"],
        "pending_debts": debt_summary["pending_count"],
    }
