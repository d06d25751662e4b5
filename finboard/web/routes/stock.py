# finboard/web/routes/stock.py
from flask import jsonify, request

from finboard.core import db, inventory
from finboard.core.models import PRODUCTS, ConsumeRequest, SellRequest, parse_amount, parse_optional_amount
from finboard.web.routes.utils import get_client, json_action, login_required, read_json, success


@login_required
@json_action("list products")
def list_products_route():
    products = inventory.get_products(get_client())
    return jsonify({
        "products": [inventory.with_valuation(p) for p in products],
        "summary": inventory.summarize_stock(products),
    })


@login_required
@json_action("add product")
def add_product_route():
    product = inventory.add_product(get_client(), read_json())
    return success("Product added successfully!", 201, product=product)


@login_required
@json_action("edit product")
def update_product_route(product_id: str):
    product = inventory.update_product(get_client(), product_id, read_json())
    return success("Product updated successfully!", product=product)


@login_required
@json_action("delete product")
def delete_product_route(product_id: str):
    inventory.delete_product(get_client(), product_id)
    return success("Product deleted successfully!")


@login_required
@json_action("sale preview")
def sale_preview_route(product_id: str):
    """Prévia do formulário de venda: preço sugerido, lucro esperado e dívida restante."""
    product = db.get_row(get_client(), PRODUCTS, product_id)
    quantity = parse_amount(request.args.get("quantity"), "Quantity")
    total_earned = parse_amount(request.args.get("total_earned", 0), "Total earned")
    amount_received = parse_optional_amount(request.args.get("amount_received"), "Amount received")
    create_debt = request.args.get("create_debt", "").lower() in ("1", "true", "yes", "on")
    return jsonify(inventory.sale_preview(product, quantity, total_earned, amount_received, create_debt))


@login_required
@json_action("sell product")
def sell_product_route(product_id: str):
    result = inventory.sell_product(get_client(), SellRequest.from_json(product_id, read_json()))
    return success(result.pop("message"), **result)


@login_required
@json_action("consume product")
def consume_product_route(product_id: str):
    result = inventory.consume_product(get_client(), ConsumeRequest.from_json(product_id, read_json()))
    return success(result.pop("message"), **result)


@login_required
@json_action("list consumptions")
def list_consumptions_route():
    return jsonify(inventory.get_consumptions(get_client()))
