# finboard/core/models.py
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from finboard.core.errors import ValidationError

# Tabelas do Supabase
INCOMES = "incomes"
EXPENSES = "expenses"
PRODUCTS = "products"
DEBTS = "debts"
CONSUMPTIONS = "consumptions"
WORK_HOURS = "work_hours"
CALENDAR_EVENTS = "calendar_events"
TASKS = "tasks"
USERS = "users"

# Categorias fixas do livro-caixa
CATEGORY_PRODUCT_SALE = "Product Sale"
CATEGORY_STOCK_CONSUMPTION = "Stock Consumption"
CATEGORY_DEBT_PAYMENT = "Debt Payment"
CATEGORY_DEBT_COLLECTION = "Debt Collection"

# Direção e status das dívidas
OWED_BY_ME = "owed_by_me"
OWED_TO_ME = "owed_to_me"
DEBT_DIRECTIONS = (OWED_BY_ME, OWED_TO_ME)

STATUS_PENDING = "pending"
STATUS_PAID = "paid"


def parse_amount(value: Any, field: str) -> float:
    """Converte o valor vindo do formulário/JSON para float."""
    if value is None or value == "":
        raise ValidationError(f"{field} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number")


def parse_optional_amount(value: Any, field: str) -> Union[float, None]:
    if value is None or value == "":
        return None
    return parse_amount(value, field)


@dataclass(frozen=True)
class SellRequest:
    """Venda de uma quantidade de um produto do estoque."""

    product_id: str
    quantity: float
    total_earned: float
    create_debt: bool = False
    debt_person_name: Optional[str] = None
    amount_received: Optional[float] = None

    @classmethod
    def from_json(cls, product_id: str, data: Dict[str, Any]) -> "SellRequest":
        return cls(
            product_id=product_id,
            quantity=parse_amount(data.get("quantity"), "Quantity"),
            total_earned=parse_amount(data.get("total_earned"), "Total earned"),
            create_debt=bool(data.get("create_debt", False)),
            debt_person_name=(data.get("debt_person_name") or "").strip() or None,
            amount_received=parse_optional_amount(data.get("amount_received"), "Amount received"),
        )


@dataclass(frozen=True)
class ConsumeRequest:
    """Retirada de estoque para uso pessoal."""

    product_id: str
    quantity: float

    @classmethod
    def from_json(cls, product_id: str, data: Dict[str, Any]) -> "ConsumeRequest":
        return cls(product_id=product_id, quantity=parse_amount(data.get("quantity"), "Quantity"))


@dataclass(frozen=True)
class DebtPaymentRequest:
    """Pagamento (ou recebimento) parcial ou total de uma dívida."""

    debt_id: str
    payment: float

    @classmethod
    def from_json(cls, debt_id: str, data: Dict[str, Any]) -> "DebtPaymentRequest":
        return cls(debt_id=debt_id, payment=parse_amount(data.get("payment"), "Payment"))
