# finboard/web/routes/wallet.py
# As mesmas rotas servem ganhos e gastos; a tabela chega pelos "defaults" do add_url_rule.
from flask import jsonify, request

from finboard.core import ledger
from finboard.core.models import EXPENSES
from finboard.web.routes.utils import get_client, json_action, login_required, read_json, success

LABELS = {"incomes": "Income", "expenses": "Expense"}


@login_required
@json_action("list ledger entries")
def list_entries_route(table: str):
    year = request.args.get("year", type=int)
    month = request.args.get("month", type=int)
    entries = ledger.list_entries(get_client(), table, year, month)
    return jsonify(entries)


@login_required
@json_action("add ledger entry")
def add_entry_route(table: str):
    entry = ledger.add_entry(get_client(), table, read_json())
    return success(f"{LABELS[table]} added successfully!", 201, entry=entry)


@login_required
@json_action("edit ledger entry")
def update_entry_route(table: str, entry_id: str):
    entry = ledger.update_entry(get_client(), table, entry_id, read_json())
    return success(f"{LABELS[table]} updated successfully!", entry=entry)


@login_required
@json_action("delete ledger entry")
def delete_entry_route(table: str, entry_id: str):
    ledger.delete_entry(get_client(), table, entry_id)
    return success(f"{LABELS[table]} deleted successfully!")


@login_required
@json_action("wallet summary")
def wallet_summary_route():
    client = get_client()
    year = request.args.get("year", type=int)
    month = request.args.get("month", type=int)
    summary = ledger.get_wallet_summary(client, year, month)
    summary["expenses_by_category"] = ledger.expenses_by_category(
        ledger.list_entries(client, EXPENSES, year, month)
    )
    return jsonify(summary)
