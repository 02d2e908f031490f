import pytest
from conftest import FIXED_NOW, line_item, order, orders_body

from shopify_mcp.core.exceptions import ToolExecutionError
from shopify_mcp.tools import OperationContext
from shopify_mcp.tools.aggregator import (
    aggregate_financial_summary,
    aggregate_product_analytics,
    aggregate_sales_summary,
    aggregate_store_summary,
    parse_amount,
    passthrough,
    rank_products,
    turnover_rate,
)
from shopify_mcp.tools.schema import (
    GetFinancialSummaryArgs,
    GetProductAnalyticsArgs,
    GetSalesSummaryArgs,
    GetStoreSummaryArgs,
)

CONTEXT = OperationContext(shop_name="test-shop", now=FIXED_NOW)


def test_passthrough_returns_body_unchanged() -> None:
    body = {"data": {"orders": {"edges": []}}, "extensions": {"cost": {}}}
    assert passthrough(None, [body], CONTEXT) is body


@pytest.mark.parametrize(
    "value, expected",
    [("12.50", 12.5), (None, 0.0), ("abc", 0.0), (3, 3.0), ("NaN", 0.0), ("Infinity", 0.0), ("-inf", 0.0)],
)
def test_parse_amount(value: object, expected: float) -> None:
    assert parse_amount(value) == expected


def test_financial_summary() -> None:
    body = orders_body(
        order("100.00", "EUR", "PAID"),
        order("50.00", "EUR", "PENDING"),
        order("30.00", "EUR", "PAID"),
    )
    summary = aggregate_financial_summary(GetFinancialSummaryArgs(days=7), [body], CONTEXT)

    assert summary == {
        "period_days": 7,
        "total_orders": 3,
        "total_revenue": 180.0,
        "currency": "EUR",
        "average_order_value": 60.0,
        "by_status": {"PAID": 2, "PENDING": 1},
        "truncated": False,
    }


def test_financial_summary_without_orders() -> None:
    summary = aggregate_financial_summary(GetFinancialSummaryArgs(), [orders_body()], CONTEXT)

    assert summary["total_orders"] == 0
    assert summary["total_revenue"] == 0
    assert summary["average_order_value"] == 0
    assert summary["currency"] == "USD"
    assert summary["by_status"] == {}


def test_financial_summary_flags_a_full_page() -> None:
    body = orders_body(*[order("1.00") for _ in range(250)])
    summary = aggregate_financial_summary(GetFinancialSummaryArgs(), [body], CONTEXT)

    assert summary["total_orders"] == 250
    assert summary["truncated"] is True


def test_missing_connection_is_an_execution_error() -> None:
    with pytest.raises(ToolExecutionError, match="missing 'orders'"):
        aggregate_financial_summary(GetFinancialSummaryArgs(), [{"data": None}], CONTEXT)


def test_rank_products_by_revenue() -> None:
    orders = [
        order(
            "0",
            line_items=[
                line_item(2, "10.00", "gid://shopify/Product/1", "Mug"),
                line_item(1, "50.00", "gid://shopify/Product/2", "Lamp"),
            ],
        )["node"],
        order("0", line_items=[line_item(3, "10.00", "gid://shopify/Product/1", "Mug")])["node"],
    ]
    ranked = rank_products(orders)

    # Equal revenue: first seen wins
    assert ranked == [
        {"product_id": "gid://shopify/Product/1", "title": "Mug", "quantity_sold": 5, "revenue": 50.0},
        {"product_id": "gid://shopify/Product/2", "title": "Lamp", "quantity_sold": 1, "revenue": 50.0},
    ]


def test_rank_products_groups_unlinked_items_by_title() -> None:
    orders = [
        order("0", line_items=[line_item(1, "5.00", title="Gift wrap"), line_item(2, "5.00", title="Gift wrap")])[
            "node"
        ]
    ]
    assert rank_products(orders) == [{"product_id": None, "title": "Gift wrap", "quantity_sold": 3, "revenue": 15.0}]


def test_rank_products_keeps_top_ten() -> None:
    items = [line_item(1, f"{i}.00", f"gid://shopify/Product/{i}", f"P{i}") for i in range(1, 13)]
    ranked = rank_products([order("0", line_items=items)["node"]])

    assert len(ranked) == 10
    assert ranked[0]["product_id"] == "gid://shopify/Product/12"
    assert ranked[-1]["product_id"] == "gid://shopify/Product/3"


def test_sales_summary() -> None:
    body = orders_body(
        order("20.00", customer_id="gid://shopify/Customer/1", line_items=[line_item(2, "10.00", "gid://shopify/Product/1")]),
        order("15.00", customer_id="gid://shopify/Customer/1", line_items=[line_item(1, "15.00", "gid://shopify/Product/2")]),
        order("5.00", line_items=[line_item(1, "5.00", "gid://shopify/Product/1")]),
    )
    summary = aggregate_sales_summary(GetSalesSummaryArgs(), [body], CONTEXT)

    assert summary["period_days"] == 30
    assert summary["total_orders"] == 3
    assert summary["total_revenue"] == 40.0
    assert summary["unique_customers"] == 1
    assert summary["average_order_value"] == pytest.approx(40.0 / 3)
    assert summary["top_products"][0] == {
        "product_id": "gid://shopify/Product/1",
        "title": "Item",
        "quantity_sold": 3,
        "revenue": 25.0,
    }
    assert summary["truncated"] is False


def test_store_summary() -> None:
    products = {"data": {"products": {"edges": [{"node": {"id": "p1"}}, {"node": {"id": "p2"}}]}}}
    latest = orders_body(order("1.00", order_id="gid://shopify/Order/9"))
    recent = orders_body(order("10.00", "CAD"), order("2.50", "CAD"))

    summary = aggregate_store_summary(GetStoreSummaryArgs(), [products, latest, recent], CONTEXT)

    assert summary == {
        "store_name": "test-shop",
        "products": {"total": 2},
        "orders": {
            "recent_count": 2,
            "total_revenue": 12.5,
            "currency": "CAD",
            "latest_order_id": "gid://shopify/Order/9",
        },
    }


def test_store_summary_empty_store() -> None:
    empty_products = {"data": {"products": {"edges": []}}}
    summary = aggregate_store_summary(GetStoreSummaryArgs(), [empty_products, orders_body(), orders_body()], CONTEXT)

    assert summary["products"]["total"] == 0
    assert summary["orders"]["latest_order_id"] is None
    assert summary["orders"]["currency"] == "USD"


def _product_body(total_inventory: object, variants: int = 2) -> dict:
    return {
        "data": {
            "product": {
                "id": "gid://shopify/Product/1",
                "title": "Mug",
                "totalInventory": total_inventory,
                "variants": {"edges": [{"node": {"id": f"v{i}"}} for i in range(variants)]},
            }
        }
    }


def test_product_analytics() -> None:
    orders = orders_body(
        order("0", line_items=[line_item(2, "10.00", "gid://shopify/Product/1"), line_item(5, "1.00", "gid://shopify/Product/2")]),
        order("0", line_items=[line_item(3, "10.00", "gid://shopify/Product/1")]),
    )
    args = GetProductAnalyticsArgs(product_id="1")
    result = aggregate_product_analytics(args, [_product_body(20), orders], CONTEXT)

    assert result == {
        "product": {"id": "gid://shopify/Product/1", "title": "Mug", "total_inventory": 20, "variants_count": 2},
        "sales": {"total_quantity_sold": 5, "total_revenue": 50.0},
        "inventory": {"current_stock": 20, "turnover_rate": 25.0},
    }


def test_product_analytics_without_stock() -> None:
    orders = orders_body(order("0", line_items=[line_item(4, "1.00", "gid://shopify/Product/1")]))
    result = aggregate_product_analytics(GetProductAnalyticsArgs(product_id="1"), [_product_body(0), orders], CONTEXT)
    assert result["inventory"]["turnover_rate"] == 0


def test_product_analytics_unknown_product() -> None:
    with pytest.raises(ToolExecutionError, match="Product not found: gid://shopify/Product/404"):
        # The order scan is skipped for a missing product, so only one body arrives
        aggregate_product_analytics(GetProductAnalyticsArgs(product_id="404"), [{"data": {"product": None}}], CONTEXT)


@pytest.mark.parametrize("sold, stock, expected", [(5, 20, 25.0), (5, 0, 0), (5, None, 0), (5, -2, 0)])
def test_turnover_rate(sold: int, stock: object, expected: float) -> None:
    assert turnover_rate(sold, stock) == expected  # type: ignore[arg-type]
