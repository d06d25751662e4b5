# finboard/web/routes/dashboard.py
from flask import jsonify, send_file

from finboard.core import charts, dashboard
from finboard.web.routes.utils import get_client, json_action, login_required


@login_required
@json_action("dashboard")
def dashboard_route():
    return jsonify(dashboard.get_dashboard_stats(get_client()))


@login_required
@json_action("balance chart")
def balance_chart_route():
    """Gera e envia o gráfico de balanço mensal."""
    chart_buffer = charts.generate_balance_chart(get_client())
    if not chart_buffer:
        return jsonify({"error": "Not enough data yet. Record some income and expenses first!"}), 404
    return send_file(chart_buffer, mimetype="image/png", download_name="balance_chart.png")


@login_required
@json_action("stock chart")
def stock_chart_route():
    chart_buffer = charts.generate_stock_chart(get_client())
    if not chart_buffer:
        return jsonify({"error": "No products in stock yet."}), 404
    return send_file(chart_buffer, mimetype="image/png", download_name="stock_chart.png")
