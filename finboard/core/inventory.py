# finboard/core/inventory.py
from typing import Any, Dict, List, Union
from supabase import Client

from finboard.core import db
from finboard.core.batch import WriteBatch
from finboard.core.errors import ValidationError
from finboard.core.models import (
    CATEGORY_PRODUCT_SALE,
    CATEGORY_STOCK_CONSUMPTION,
    CONSUMPTIONS,
    DEBTS,
    EXPENSES,
    INCOMES,
    OWED_TO_ME,
    PRODUCTS,
    STATUS_PENDING,
    ConsumeRequest,
    SellRequest,
    parse_amount,
)
from finboard.utils.date_utils import now_iso

QUANTITY_DECIMALS = 6


# --- Produtos (CRUD) ---
def build_product(data: Dict[str, Any]) -> Dict[str, Any]:
    """Valida os campos de um produto vindos do formulário."""
    name = (data.get("name") or "").strip()
    if not name:
        raise ValidationError("Product name is required")
    product = {
        "name": name,
        "stock_quantity": parse_amount(data.get("stock_quantity"), "Stock quantity"),
        "cost_per_unit": parse_amount(data.get("cost_per_unit"), "Cost per unit"),
        "price_per_unit": parse_amount(data.get("price_per_unit"), "Price per unit"),
    }
    for field in ("stock_quantity", "cost_per_unit", "price_per_unit"):
        if product[field] < 0:
            raise ValidationError(f"{field.replace('_', ' ').capitalize()} cannot be negative")
    return product


def get_products(supabase_client: Client) -> List[Dict[str, Any]]:
    return db.list_rows(supabase_client, PRODUCTS)


def add_product(supabase_client: Client, data: Dict[str, Any]) -> Dict[str, Any]:
    return db.insert_row(supabase_client, PRODUCTS, build_product(data))


def update_product(supabase_client: Client, product_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
    return db.update_row(supabase_client, PRODUCTS, product_id, build_product(data))


def delete_product(supabase_client: Client, product_id: str) -> None:
    db.delete_row(supabase_client, PRODUCTS, product_id)


def get_consumptions(supabase_client: Client) -> List[Dict[str, Any]]:
    return db.list_rows(supabase_client, CONSUMPTIONS, order_by="date", desc=True)


# --- Valores do estoque ---
def total_cost(product: Dict[str, Any]) -> float:
    return float(product["stock_quantity"]) * float(product["cost_per_unit"])


def total_value(product: Dict[str, Any]) -> float:
    return float(product["stock_quantity"]) * float(product["price_per_unit"])


def profit(product: Dict[str, Any]) -> float:
    return total_value(product) - total_cost(product)


def with_valuation(product: Dict[str, Any]) -> Dict[str, Any]:
    """Cópia do produto com custo, valor e lucro potencial do estoque atual."""
    product_copy = product.copy()
    product_copy["total_cost"] = total_cost(product)
    product_copy["total_value"] = total_value(product)
    product_copy["profit"] = profit(product)
    return product_copy


def summarize_stock(products: List[Dict[str, Any]]) -> Dict[str, Any]:
    stock_value = sum(total_value(p) for p in products)
    stock_cost = sum(total_cost(p) for p in products)
    return {
        "total_products": len(products),
        "total_stock_value": stock_value,
        "total_cost": stock_cost,
        "total_profit": stock_value - stock_cost,
        "total_quantity": sum(float(p["stock_quantity"]) for p in products),
    }


def suggested_price(product: Dict[str, Any], quantity: float) -> float:
    """Preço sugerido pela tabela (o valor real da venda é digitado pelo usuário)."""
    return quantity * float(product["price_per_unit"])


def sale_preview(product: Dict[str, Any], quantity: float, total_earned: float,
                 amount_received: Union[float, None] = None, create_debt: bool = False) -> Dict[str, float]:
    """Mesma regra da venda: sem dívida tudo é recebido; com dívida, campo vazio vale 0."""
    received = (amount_received or 0.0) if create_debt else total_earned
    return {
        "suggested_price": suggested_price(product, quantity),
        "expected_profit": total_earned - quantity * float(product["cost_per_unit"]),
        "amount_received": received,
        "debt_remaining": total_earned - received,
    }


def round_quantity(value: float) -> float:
    """Corta o ruído de ponto flutuante (0.3 - 0.1 = 0.19999999999999998)."""
    # + 0.0 transforma -0.0 em 0.0
    return round(value, QUANTITY_DECIMALS) + 0.0


def _require_stock(product: Dict[str, Any], quantity: float, action: str) -> None:
    if quantity <= 0:
        raise ValidationError("Quantity must be greater than 0")
    if round_quantity(quantity - float(product["stock_quantity"])) > 0:
        raise ValidationError(f"Not enough stock to {action}")


# --- Venda ---
def sell_product(supabase_client: Client, request: SellRequest) -> Dict[str, Any]:
    """
    Vende parte do estoque: baixa o estoque, registra o ganho recebido agora e,
    se pedido, cria uma dívida (a receber) com o restante. Tudo num único lote.
    """
    product = db.get_row(supabase_client, PRODUCTS, request.product_id)

    if request.quantity <= 0:
        raise ValidationError("Quantity must be greater than 0")
    if request.total_earned <= 0:
        raise ValidationError("Total earned must be greater than 0")
    _require_stock(product, request.quantity, "sell")

    if request.create_debt:
        if not request.debt_person_name:
            raise ValidationError("Please enter person's name for debt")
        # Campo vazio significa que nada foi pago ainda
        amount_received = request.amount_received or 0.0
        if amount_received < 0:
            raise ValidationError("Amount paid cannot be negative")
        if amount_received > request.total_earned:
            raise ValidationError("Amount paid cannot be greater than total earned")
    else:
        amount_received = request.total_earned

    new_stock = round_quantity(float(product["stock_quantity"]) - request.quantity)
    unit_price = request.total_earned / request.quantity
    description = f"Sold {request.quantity:g} units of {product['name']} at ${unit_price:.2f}/unit"
    date = now_iso()

    batch = WriteBatch()
    batch.update(PRODUCTS, product["id"], {"stock_quantity": new_stock})
    if amount_received > 0:
        batch.insert(INCOMES, {
            "description": description,
            "amount": amount_received,
            "category": CATEGORY_PRODUCT_SALE,
            "date": date,
        })

    debt_amount = 0.0
    if request.create_debt and amount_received < request.total_earned:
        debt_amount = request.total_earned - amount_received
        batch.insert(DEBTS, {
            "person_name": request.debt_person_name,
            "amount": request.total_earned,
            "amount_paid": amount_received,
            "description": description,
            "direction": OWED_TO_ME,
            "status": STATUS_PENDING,
            "date": date,
        })
    batch.commit(supabase_client)

    message = f"Sold {request.quantity:g} units for ${request.total_earned:.2f} (${unit_price:.2f}/unit)."
    if debt_amount > 0:
        message += f" Added ${debt_amount:.2f} debt from {request.debt_person_name}."
    if amount_received > 0:
        message += f" Received ${amount_received:.2f}."
    print(f"DEBUG: Venda registrada para o produto {product['id']}: {message}")

    return {
        "message": message,
        "stock_quantity": new_stock,
        "amount_received": amount_received,
        "unit_price": unit_price,
        "debt_amount": debt_amount,
    }


# --- Consumo ---
def consume_product(supabase_client: Client, request: ConsumeRequest) -> Dict[str, Any]:
    """
    Retira estoque para uso pessoal. Gera um registro de consumo e um gasto
    'Stock Consumption' pelo custo, que não altera o saldo.
    """
    product = db.get_row(supabase_client, PRODUCTS, request.product_id)
    _require_stock(product, request.quantity, "consume")

    new_stock = round_quantity(float(product["stock_quantity"]) - request.quantity)
    cost_value = request.quantity * float(product["cost_per_unit"])
    date = now_iso()

    batch = WriteBatch()
    batch.update(PRODUCTS, product["id"], {"stock_quantity": new_stock})
    batch.insert(CONSUMPTIONS, {
        "product_id": product["id"],
        "product_name": product["name"],
        "quantity": request.quantity,
        "cost_value": cost_value,
        "date": date,
    })
    # Produto sem custo não gera gasto (amount > 0 no livro-caixa)
    if cost_value > 0:
        batch.insert(EXPENSES, {
            "description": f"Consumed {request.quantity:g} units of {product['name']}",
            "amount": cost_value,
            "category": CATEGORY_STOCK_CONSUMPTION,
            "date": date,
        })
    batch.commit(supabase_client)

    message = (f"Consumed {request.quantity:g} units (worth ${cost_value:.2f}). "
               "Added to expense history (no balance change).")
    return {"message": message, "stock_quantity": new_stock, "cost_value": cost_value}
