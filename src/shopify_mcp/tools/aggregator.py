"""Client-side post-processing of upstream results.

Summaries are computed over the single page of orders the composer asked for
(at most ``ORDER_SCAN_LIMIT``). When that page comes back full the window may
hold more orders than were seen, which the summaries report as ``truncated``.
Money arrives as decimal strings and is summed as floats.
"""

import math
from typing import Any, Dict, List, Mapping, Optional

from .composer import ORDER_SCAN_LIMIT
from .models import OperationContext
from .schema import (
    GetFinancialSummaryArgs,
    GetProductAnalyticsArgs,
    GetSalesSummaryArgs,
    GetStoreSummaryArgs,
)
from ..core.exceptions import ToolExecutionError
from ..core.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CURRENCY = "USD"
TOP_PRODUCTS_LIMIT = 10


def passthrough(args: Any, results: List[Dict[str, Any]], context: OperationContext) -> Dict[str, Any]:
    """Return the single upstream body unchanged."""
    return results[0]


def _connection_nodes(body: Mapping[str, Any], field: str) -> List[Dict[str, Any]]:
    """The ``edges[].node`` list of a top-level connection in a response body."""
    data = body.get("data") if isinstance(body, Mapping) else None
    if not isinstance(data, Mapping) or not isinstance(data.get(field), Mapping):
        raise ToolExecutionError(f"Unexpected response from Shopify: missing '{field}' in data")
    edges = data[field].get("edges") or []
    return [edge["node"] for edge in edges if isinstance(edge, Mapping) and edge.get("node") is not None]


def parse_amount(value: Any) -> float:
    """Parse a Shopify decimal string; anything unparseable or non-finite counts as zero."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def _shop_money(node: Mapping[str, Any], field: str) -> Mapping[str, Any]:
    return ((node.get(field) or {}).get("shopMoney")) or {}


def order_total(order: Mapping[str, Any]) -> float:
    return parse_amount(_shop_money(order, "totalPriceSet").get("amount"))


def order_currency(orders: List[Dict[str, Any]]) -> str:
    """Currency of the first order in the sample, USD when there are none."""
    if not orders:
        return DEFAULT_CURRENCY
    return _shop_money(orders[0], "totalPriceSet").get("currencyCode") or DEFAULT_CURRENCY


def line_item_revenue(line_item: Mapping[str, Any]) -> float:
    return (line_item.get("quantity") or 0) * parse_amount(_shop_money(line_item, "originalUnitPriceSet").get("amount"))


def _line_items(order: Mapping[str, Any]) -> List[Dict[str, Any]]:
    edges = (order.get("lineItems") or {}).get("edges") or []
    return [edge["node"] for edge in edges if edge.get("node") is not None]


def average(total: float, count: int) -> float:
    return total / count if count > 0 else 0


def aggregate_financial_summary(
    args: GetFinancialSummaryArgs, results: List[Dict[str, Any]], context: OperationContext
) -> Dict[str, Any]:
    orders = _connection_nodes(results[0], "orders")
    total_revenue = sum(order_total(order) for order in orders)

    by_status: Dict[str, int] = {}
    for order in orders:
        status = order.get("financialStatus")
        by_status[status] = by_status.get(status, 0) + 1

    return {
        "period_days": args.days,
        "total_orders": len(orders),
        "total_revenue": total_revenue,
        "currency": order_currency(orders),
        "average_order_value": average(total_revenue, len(orders)),
        "by_status": by_status,
        "truncated": len(orders) >= ORDER_SCAN_LIMIT,
    }


def rank_products(orders: List[Dict[str, Any]], limit: int = TOP_PRODUCTS_LIMIT) -> List[Dict[str, Any]]:
    """Accumulate line items per product and return the best sellers by revenue.

    Line items without a linked product are grouped by their own title. Ties
    keep the order in which products were first seen.
    """
    sales: Dict[str, Dict[str, Any]] = {}
    for order in orders:
        for item in _line_items(order):
            product = item.get("product") or {}
            product_id: Optional[str] = product.get("id")
            key = product_id or f"title:{item.get('title')}"
            entry = sales.get(key)
            if entry is None:
                entry = sales[key] = {
                    "product_id": product_id,
                    "title": product.get("title") or item.get("title"),
                    "quantity_sold": 0,
                    "revenue": 0.0,
                }
            entry["quantity_sold"] += item.get("quantity") or 0
            entry["revenue"] += line_item_revenue(item)

    ranked = sorted(sales.values(), key=lambda entry: entry["revenue"], reverse=True)
    return ranked[:limit]


def aggregate_sales_summary(
    args: GetSalesSummaryArgs, results: List[Dict[str, Any]], context: OperationContext
) -> Dict[str, Any]:
    orders = _connection_nodes(results[0], "orders")
    total_revenue = sum(order_total(order) for order in orders)
    customers = {
        (order.get("customer") or {}).get("id")
        for order in orders
        if (order.get("customer") or {}).get("id") is not None
    }

    return {
        "period_days": args.days,
        "total_orders": len(orders),
        "total_revenue": total_revenue,
        "currency": order_currency(orders),
        "unique_customers": len(customers),
        "average_order_value": average(total_revenue, len(orders)),
        "top_products": rank_products(orders),
        "truncated": len(orders) >= ORDER_SCAN_LIMIT,
    }


def aggregate_store_summary(
    args: GetStoreSummaryArgs, results: List[Dict[str, Any]], context: OperationContext
) -> Dict[str, Any]:
    products_body, latest_body, recent_body = results
    products = _connection_nodes(products_body, "products")
    latest = _connection_nodes(latest_body, "orders")
    orders = _connection_nodes(recent_body, "orders")

    return {
        "store_name": context.shop_name,
        "products": {
            "total": len(products),
        },
        "orders": {
            "recent_count": len(orders),
            "total_revenue": sum(order_total(order) for order in orders),
            "currency": order_currency(orders),
            "latest_order_id": latest[0].get("id") if latest else None,
        },
    }


def turnover_rate(quantity_sold: int, stock: Optional[int]) -> float:
    """Quantity sold as a percentage of current stock; 0 when nothing is in stock."""
    if not stock or stock <= 0:
        return 0
    return quantity_sold / stock * 100


def aggregate_product_analytics(
    args: GetProductAnalyticsArgs, results: List[Dict[str, Any]], context: OperationContext
) -> Dict[str, Any]:
    product = (results[0].get("data") or {}).get("product")
    if not product:
        raise ToolExecutionError(f"Product not found: {args.product_id}")
    orders_body = results[1]

    quantity_sold = 0
    revenue = 0.0
    for order in _connection_nodes(orders_body, "orders"):
        for item in _line_items(order):
            if (item.get("product") or {}).get("id") == args.product_id:
                quantity_sold += item.get("quantity") or 0
                revenue += line_item_revenue(item)

    stock = product.get("totalInventory")
    variants = (product.get("variants") or {}).get("edges") or []
    logger.debug("Product '%s': %d sold against stock %s.", args.product_id, quantity_sold, stock)

    return {
        "product": {
            "id": product.get("id"),
            "title": product.get("title"),
            "total_inventory": stock,
            "variants_count": len(variants),
        },
        "sales": {
            "total_quantity_sold": quantity_sold,
            "total_revenue": revenue,
        },
        "inventory": {
            "current_stock": stock,
            "turnover_rate": turnover_rate(quantity_sold, stock),
        },
    }
