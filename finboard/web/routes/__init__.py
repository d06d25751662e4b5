# finboard/web/routes/__init__.py

from .auth import login_route, logout_route
from .dashboard import balance_chart_route, dashboard_route, stock_chart_route
from .debts import (
    add_debt_route,
    delete_debt_route,
    list_debts_route,
    pay_debt_route,
    update_debt_route,
)
from .planner import (
    add_event_route,
    add_task_route,
    delete_event_route,
    delete_task_route,
    list_events_route,
    list_tasks_route,
    month_route,
    toggle_task_route,
)
from .stock import (
    add_product_route,
    consume_product_route,
    delete_product_route,
    list_consumptions_route,
    list_products_route,
    sale_preview_route,
    sell_product_route,
    update_product_route,
)
from .telegram import telegram_forward_route
from .wallet import (
    add_entry_route,
    delete_entry_route,
    list_entries_route,
    update_entry_route,
    wallet_summary_route,
)
from .work_hours import (
    clock_in_route,
    clock_out_route,
    delete_work_entry_route,
    list_work_hours_route,
    update_work_entry_route,
)
