# finboard/core/debts.py
from typing import Any, Dict, List
from supabase import Client

from finboard.core import db
from finboard.core.batch import WriteBatch
from finboard.core.errors import ValidationError
from finboard.core.models import (
    CATEGORY_DEBT_COLLECTION,
    CATEGORY_DEBT_PAYMENT,
    DEBT_DIRECTIONS,
    DEBTS,
    EXPENSES,
    INCOMES,
    OWED_BY_ME,
    OWED_TO_ME,
    STATUS_PAID,
    STATUS_PENDING,
    DebtPaymentRequest,
    parse_amount,
)
from finboard.utils.date_utils import now_iso


def derive_status(amount: float, amount_paid: float) -> str:
    return STATUS_PAID if amount_paid >= amount else STATUS_PENDING


def remaining(debt: Dict[str, Any]) -> float:
    return float(debt["amount"]) - float(debt.get("amount_paid") or 0)


def _debt_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    person_name = (data.get("person_name") or "").strip()
    if not person_name:
        raise ValidationError("Person name is required")
    amount = parse_amount(data.get("amount"), "Amount")
    if amount <= 0:
        raise ValidationError("Amount must be greater than 0")
    return {
        "person_name": person_name,
        "amount": amount,
        "description": (data.get("description") or "").strip() or None,
        "due_date": data.get("due_date") or None,
    }


# --- CRUD ---
def get_debts(supabase_client: Client) -> List[Dict[str, Any]]:
    return db.list_rows(supabase_client, DEBTS)


def add_debt(supabase_client: Client, data: Dict[str, Any]) -> Dict[str, Any]:
    debt = _debt_fields(data)
    direction = data.get("direction")
    if direction not in DEBT_DIRECTIONS:
        raise ValidationError(f"Direction must be one of: {', '.join(DEBT_DIRECTIONS)}")
    debt.update({
        "direction": direction,
        "amount_paid": 0.0,
        "status": STATUS_PENDING,
        "date": now_iso(),
    })
    return db.insert_row(supabase_client, DEBTS, debt)


def update_debt(supabase_client: Client, debt_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """Edita nome, valor, descrição e vencimento. O status é recalculado."""
    current = db.get_row(supabase_client, DEBTS, debt_id)
    debt = _debt_fields(data)
    amount_paid = float(current.get("amount_paid") or 0)
    if debt["amount"] < amount_paid:
        raise ValidationError("Amount cannot be lower than what was already paid")
    debt["status"] = derive_status(debt["amount"], amount_paid)
    return db.update_row(supabase_client, DEBTS, debt_id, debt)


def delete_debt(supabase_client: Client, debt_id: str) -> None:
    db.delete_row(supabase_client, DEBTS, debt_id)


# --- Pagamento ---
def pay_debt(supabase_client: Client, request: DebtPaymentRequest) -> Dict[str, Any]:
    """
    Abate um pagamento da dívida e espelha no livro-caixa:
    - owed_by_me: eu pago o que devo -> gasto 'Debt Payment'
    - owed_to_me: eu recebo o que me devem -> ganho 'Debt Collection'
    """
    debt = db.get_row(supabase_client, DEBTS, request.debt_id)

    # Tudo em centavos: 0.1 + 0.2 não "ultrapassa" 0.3 e frações de centavo não passam
    payment = round(request.payment, 2)
    if payment <= 0:
        raise ValidationError("Payment must be greater than 0")
    amount = round(float(debt["amount"]), 2)
    new_amount_paid = round(float(debt.get("amount_paid") or 0) + payment, 2)
    if new_amount_paid > amount:
        raise ValidationError("Payment exceeds debt amount")

    new_status = derive_status(amount, new_amount_paid)

    batch = WriteBatch()
    batch.update(DEBTS, debt["id"], {"amount_paid": new_amount_paid, "status": new_status})
    if debt.get("direction") == OWED_TO_ME:
        batch.insert(INCOMES, {
            "description": f"Received ${payment:.2f} from {debt['person_name']}",
            "amount": payment,
            "category": CATEGORY_DEBT_COLLECTION,
            "date": now_iso(),
        })
        message = f"Payment of ${payment:.2f} recorded. Added to income."
    else:
        batch.insert(EXPENSES, {
            "description": f"Paid ${payment:.2f} to {debt['person_name']}",
            "amount": payment,
            "category": CATEGORY_DEBT_PAYMENT,
            "date": now_iso(),
        })
        message = f"Payment of ${payment:.2f} recorded. Added to expenses."
    batch.commit(supabase_client)

    return {
        "message": message,
        "amount_paid": new_amount_paid,
        "status": new_status,
        "remaining": round(amount - new_amount_paid, 2),
    }


# --- Totais ---
def summarize_debts(debts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Totais por direção (total, pago, restante) e quantidade de dívidas pendentes."""
    summary: Dict[str, Any] = {}
    for direction in (OWED_BY_ME, OWED_TO_ME):
        rows = [d for d in debts if d.get("direction") == direction]
        total = sum(float(d["amount"]) for d in rows)
        paid = sum(float(d.get("amount_paid") or 0) for d in rows)
        summary[direction] = {"total": total, "paid": paid, "remaining": total - paid}
    summary["pending_count"] = len([d for d in debts if d.get("status") == STATUS_PENDING])
    return summary
