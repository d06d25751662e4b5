# finboard/web/app_setup.py
from flask import Flask

from finboard.core.models import EXPENSES, INCOMES
from finboard.web.routes import (
    add_debt_route, add_entry_route, add_event_route, add_product_route, add_task_route,
    balance_chart_route, clock_in_route, clock_out_route, consume_product_route,
    dashboard_route, delete_debt_route, delete_entry_route, delete_event_route,
    delete_product_route, delete_task_route, delete_work_entry_route, list_consumptions_route,
    list_debts_route, list_entries_route, list_events_route, list_products_route,
    list_tasks_route, list_work_hours_route, login_route, logout_route, month_route,
    pay_debt_route, sale_preview_route, sell_product_route, stock_chart_route,
    telegram_forward_route, toggle_task_route, update_debt_route, update_entry_route,
    update_product_route, update_work_entry_route, wallet_summary_route,
)


def register_routes(app: Flask) -> None:
    """Registra todas as rotas JSON da aplicação."""
    add = app.add_url_rule

    # --- Autenticação ---
    add("/login", "login", login_route, methods=["POST"])
    add("/logout", "logout", logout_route, methods=["POST"])

    # --- Dashboard e gráficos ---
    add("/api/dashboard", "dashboard", dashboard_route, methods=["GET"])
    add("/api/charts/balance.png", "balance_chart", balance_chart_route, methods=["GET"])
    add("/api/charts/stock.png", "stock_chart", stock_chart_route, methods=["GET"])

    # --- Carteira: ganhos e gastos compartilham as mesmas funções ---
    for table in (INCOMES, EXPENSES):
        add(f"/api/{table}", f"list_{table}", list_entries_route,
            methods=["GET"], defaults={"table": table})
        add(f"/api/{table}", f"add_{table}", add_entry_route,
            methods=["POST"], defaults={"table": table})
        add(f"/api/{table}/<entry_id>", f"update_{table}", update_entry_route,
            methods=["PUT"], defaults={"table": table})
        add(f"/api/{table}/<entry_id>", f"delete_{table}", delete_entry_route,
            methods=["DELETE"], defaults={"table": table})
    add("/api/wallet/summary", "wallet_summary", wallet_summary_route, methods=["GET"])

    # --- Estoque ---
    add("/api/products", "list_products", list_products_route, methods=["GET"])
    add("/api/products", "add_product", add_product_route, methods=["POST"])
    add("/api/products/<product_id>", "update_product", update_product_route, methods=["PUT"])
    add("/api/products/<product_id>", "delete_product", delete_product_route, methods=["DELETE"])
    add("/api/products/<product_id>/sale-preview", "sale_preview", sale_preview_route, methods=["GET"])
    add("/api/products/<product_id>/sell", "sell_product", sell_product_route, methods=["POST"])
    add("/api/products/<product_id>/consume", "consume_product", consume_product_route, methods=["POST"])
    add("/api/consumptions", "list_consumptions", list_consumptions_route, methods=["GET"])

    # --- Dívidas ---
    add("/api/debts", "list_debts", list_debts_route, methods=["GET"])
    add("/api/debts", "add_debt", add_debt_route, methods=["POST"])
    add("/api/debts/<debt_id>", "update_debt", update_debt_route, methods=["PUT"])
    add("/api/debts/<debt_id>", "delete_debt", delete_debt_route, methods=["DELETE"])
    add("/api/debts/<debt_id>/pay", "pay_debt", pay_debt_route, methods=["POST"])

    # --- Horas de trabalho ---
    add("/api/work-hours", "list_work_hours", list_work_hours_route, methods=["GET"])
    add("/api/work-hours/clock-in", "clock_in", clock_in_route, methods=["POST"])
    add("/api/work-hours/clock-out", "clock_out", clock_out_route, methods=["POST"])
    add("/api/work-hours/<entry_id>", "update_work_entry", update_work_entry_route, methods=["PUT"])
    add("/api/work-hours/<entry_id>", "delete_work_entry", delete_work_entry_route, methods=["DELETE"])

    # --- Calendário e tarefas ---
    add("/api/calendar/events", "list_events", list_events_route, methods=["GET"])
    add("/api/calendar/events", "add_event", add_event_route, methods=["POST"])
    add("/api/calendar/events/<event_id>", "delete_event", delete_event_route, methods=["DELETE"])
    add("/api/calendar/month", "calendar_month", month_route, methods=["GET"])
    add("/api/tasks", "list_tasks", list_tasks_route, methods=["GET"])
    add("/api/tasks", "add_task", add_task_route, methods=["POST"])
    add("/api/tasks/<task_id>/toggle", "toggle_task", toggle_task_route, methods=["POST"])
    add("/api/tasks/<task_id>", "delete_task", delete_task_route, methods=["DELETE"])

    # --- Integração com o Telegram (protegida pelo segredo, não pela sessão) ---
    add("/api/telegram", "telegram_forward", telegram_forward_route, methods=["POST"])

    print(f"DEBUG: {len(list(app.url_map.iter_rules()))} rotas registradas.")
