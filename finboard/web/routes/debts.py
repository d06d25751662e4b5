# finboard/web/routes/debts.py
from flask import jsonify

from finboard.core import debts
from finboard.core.models import DebtPaymentRequest
from finboard.web.routes.utils import get_client, json_action, login_required, read_json, success


@login_required
@json_action("list debts")
def list_debts_route():
    rows = debts.get_debts(get_client())
    for row in rows:
        row["remaining"] = debts.remaining(row)
    return jsonify({"debts": rows, "summary": debts.summarize_debts(rows)})


@login_required
@json_action("add debt")
def add_debt_route():
    debt = debts.add_debt(get_client(), read_json())
    return success("Debt added successfully!", 201, debt=debt)


@login_required
@json_action("edit debt")
def update_debt_route(debt_id: str):
    debt = debts.update_debt(get_client(), debt_id, read_json())
    return success("Debt updated successfully!", debt=debt)


@login_required
@json_action("delete debt")
def delete_debt_route(debt_id: str):
    debts.delete_debt(get_client(), debt_id)
    return success("Debt deleted successfully!")


@login_required
@json_action("pay debt")
def pay_debt_route(debt_id: str):
    result = debts.pay_debt(get_client(), DebtPaymentRequest.from_json(debt_id, read_json()))
    return success(result.pop("message"), **result)
