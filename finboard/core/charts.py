# finboard/core/charts.py
import io
from typing import Any, Dict, List, Union

import matplotlib
matplotlib.use("Agg")  # servidor sem display
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
import pandas as pd
from supabase import Client

from finboard.core import db
from finboard.core.ledger import is_cash_expense
from finboard.core.inventory import total_cost, total_value
from finboard.core.models import EXPENSES, INCOMES, PRODUCTS

# Configurações globais para os gráficos (cores, fontes, etc.)
plt.style.use('seaborn-v0_8-darkgrid')
plt.rcParams['font.family'] = 'sans-serif'
plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10

COLORS = {
    'Income': '#28a745',
    'Expenses': '#dc3545',
    'Balance': '#007bff',
    'Cost': '#fd7e14',
    'Value': '#17a2b8',
}


def monthly_balance_frame(incomes: List[Dict[str, Any]], expenses: List[Dict[str, Any]]) -> pd.DataFrame:
    """
    Tabela mês a mês com Income, Expenses e Balance.
    Expenses inclui consumo de estoque; Balance não o subtrai (mesma regra do saldo da carteira).
    """
    rows = []
    for income in incomes:
        rows.append({'date': income['date'], 'amount': float(income['amount']), 'kind': 'Income'})
    for expense in expenses:
        rows.append({'date': expense['date'], 'amount': float(expense['amount']), 'kind': 'Expenses'})
        if is_cash_expense(expense):
            rows.append({'date': expense['date'], 'amount': float(expense['amount']), 'kind': 'CashExpenses'})

    df = pd.DataFrame(rows)
    if df.empty:
        return pd.DataFrame(columns=['Income', 'Expenses', 'Balance'])

    df['date'] = pd.to_datetime(df['date'], utc=True, format='ISO8601')
    df['month'] = df['date'].dt.strftime('%Y-%m')

    monthly = df.groupby(['month', 'kind'])['amount'].sum().unstack(fill_value=0)
    for column in ('Income', 'Expenses', 'CashExpenses'):
        if column not in monthly.columns:
            monthly[column] = 0.0
    monthly['Balance'] = monthly['Income'] - monthly['CashExpenses']
    return monthly[['Income', 'Expenses', 'Balance']].sort_index()


def _to_png(ax) -> io.BytesIO:
    ax.yaxis.set_major_formatter(mticker.FormatStrFormatter('$%.2f'))
    plt.tight_layout()
    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150)
    buf.seek(0)
    plt.close('all')
    return buf


def generate_balance_chart(supabase_client: Client) -> Union[io.BytesIO, None]:
    """Gera um gráfico de balanço mensal de ganhos vs. gastos."""
    incomes = db.list_rows(supabase_client, INCOMES, order_by='date', desc=False)
    expenses = db.list_rows(supabase_client, EXPENSES, order_by='date', desc=False)

    monthly_summary = monthly_balance_frame(incomes, expenses)
    if monthly_summary.empty:
        return None

    ax = monthly_summary.plot(
        kind='bar',
        figsize=(12, 7),
        color=[COLORS['Income'], COLORS['Expenses'], COLORS['Balance']],
    )
    ax.set_title('Monthly Balance: Income vs. Expenses', fontsize=16, fontweight='bold')
    ax.set_ylabel('Amount ($)')
    ax.set_xlabel('Month')
    plt.xticks(rotation=45, ha='right')
    for container in ax.containers:
        ax.bar_label(container, fmt='$%.2f', fontsize=8, padding=3)
    return _to_png(ax)


def stock_value_frame(products: List[Dict[str, Any]]) -> pd.DataFrame:
    df = pd.DataFrame([
        {'name': p['name'], 'Cost': total_cost(p), 'Value': total_value(p)}
        for p in products
    ])
    if df.empty:
        return pd.DataFrame(columns=['Cost', 'Value'])
    return df.groupby('name')[['Cost', 'Value']].sum().sort_values('Value', ascending=False)


def generate_stock_chart(supabase_client: Client) -> Union[io.BytesIO, None]:
    """Gera um gráfico de custo vs. valor de venda do estoque atual, por produto."""
    stock = stock_value_frame(db.list_rows(supabase_client, PRODUCTS))
    if stock.empty:
        return None

    ax = stock.plot(kind='bar', figsize=(12, 7), color=[COLORS['Cost'], COLORS['Value']])
    ax.set_title('Stock: Cost vs. Sale Value', fontsize=16, fontweight='bold')
    ax.set_ylabel('Amount ($)')
    ax.set_xlabel('Product')
    plt.xticks(rotation=45, ha='right')
    return _to_png(ax)
