# finboard/core/ledger.py
from typing import Any, Dict, List, Union
from supabase import Client

from finboard.core import db
from finboard.core.errors import ValidationError
from finboard.core.models import (
    CATEGORY_STOCK_CONSUMPTION,
    EXPENSES,
    INCOMES,
    parse_amount,
)
from finboard.utils.date_utils import in_month, now_iso

LEDGER_TABLES = (INCOMES, EXPENSES)


def _check_table(table: str) -> None:
    if table not in LEDGER_TABLES:
        raise ValueError(f"'{table}' is not a ledger table")


def build_entry(data: Dict[str, Any]) -> Dict[str, Any]:
    """Valida os campos de um ganho/gasto vindos do formulário."""
    amount = parse_amount(data.get("amount"), "Amount")
    if amount <= 0:
        raise ValidationError("Amount must be greater than 0")
    category = (data.get("category") or "").strip()
    if not category:
        raise ValidationError("Category is required")
    return {
        "amount": amount,
        "category": category,
        "description": (data.get("description") or "").strip() or None,
        "date": data.get("date") or now_iso(),
    }


# --- Ganhos e Gastos ---
def list_entries(supabase_client: Client, table: str,
                 year: Union[int, None] = None, month: Union[int, None] = None) -> List[Dict[str, Any]]:
    """Lista ganhos ou gastos (mais recentes primeiro), opcionalmente filtrados por ano/mês."""
    _check_table(table)
    rows = db.list_rows(supabase_client, table, order_by="date", desc=True)
    if year or month:
        rows = [row for row in rows if in_month(row.get("date"), year, month)]
    return rows


def add_entry(supabase_client: Client, table: str, data: Dict[str, Any]) -> Dict[str, Any]:
    _check_table(table)
    return db.insert_row(supabase_client, table, build_entry(data))


def update_entry(supabase_client: Client, table: str, row_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    _check_table(table)
    return db.update_row(supabase_client, table, row_id, build_entry(data))


def delete_entry(supabase_client: Client, table: str, row_id: str) -> None:
    _check_table(table)
    db.delete_row(supabase_client, table, row_id)


# --- Agregação ---
def is_cash_expense(expense: Dict[str, Any]) -> bool:
    """Consumo de estoque é baixa contábil, não saída de caixa."""
    return expense.get("category") != CATEGORY_STOCK_CONSUMPTION


def summarize(incomes: List[Dict[str, Any]], expenses: List[Dict[str, Any]]) -> Dict[str, float]:
    """
    Calcula totais e saldo.
    O total de gastos exibido inclui o consumo de estoque; o saldo não o subtrai.
    """
    total_income = sum(float(row["amount"]) for row in incomes)
    total_expenses = sum(float(row["amount"]) for row in expenses)
    cash_expenses = sum(float(row["amount"]) for row in expenses if is_cash_expense(row))
    return {
        "total_income": total_income,
        "total_expenses": total_expenses,
        "balance": total_income - cash_expenses,
    }


def get_wallet_summary(supabase_client: Client,
                       year: Union[int, None] = None, month: Union[int, None] = None) -> Dict[str, float]:
    incomes = list_entries(supabase_client, INCOMES, year, month)
    expenses = list_entries(supabase_client, EXPENSES, year, month)
    return summarize(incomes, expenses)


def expenses_by_category(expenses: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Total de gastos por categoria, do maior para o menor."""
    totals: Dict[str, float] = {}
    for row in expenses:
        category = row.get("category") or "Other"
        totals[category] = totals.get(category, 0.0) + float(row["amount"])
    return [
        {"category": category, "amount": amount}
        for category, amount in sorted(totals.items(), key=lambda item: item[1], reverse=True)
    ]
