from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from shopify_mcp import Dispatcher, OperationRegistry, build_registry

FIXED_NOW = datetime(2024, 5, 31, 12, 0, 0, 123000, tzinfo=timezone.utc)


def money(amount: str, currency: str = "USD") -> Dict[str, Any]:
    return {"shopMoney": {"amount": amount, "currencyCode": currency}}


def line_item(
    quantity: int, unit_price: str, product_id: Optional[str] = None, title: str = "Item", product_title: Optional[str] = None
) -> Dict[str, Any]:
    product = {"id": product_id, "title": product_title or title} if product_id else None
    return {
        "node": {
            "title": title,
            "quantity": quantity,
            "originalUnitPriceSet": money(unit_price),
            "product": product,
        }
    }


def order(
    total: str,
    currency: str = "USD",
    financial_status: str = "PAID",
    customer_id: Optional[str] = None,
    line_items: Optional[List[Dict[str, Any]]] = None,
    order_id: str = "gid://shopify/Order/1",
) -> Dict[str, Any]:
    return {
        "node": {
            "id": order_id,
            "createdAt": "2024-05-20T10:00:00Z",
            "totalPriceSet": money(total, currency),
            "financialStatus": financial_status,
            "lineItems": {"edges": line_items or []},
            "customer": {"id": customer_id, "email": None} if customer_id else None,
        }
    }


def orders_body(*orders: Dict[str, Any]) -> Dict[str, Any]:
    return {"data": {"orders": {"edges": list(orders)}}}


@pytest.fixture
def registry() -> OperationRegistry:
    return build_registry()


@pytest.fixture
def executor() -> AsyncMock:
    """Stand-in for the upstream GraphQL executor."""
    mock = AsyncMock()
    mock.execute = AsyncMock(return_value={"data": {}})
    return mock


@pytest.fixture
def dispatcher(registry: OperationRegistry, executor: AsyncMock) -> Dispatcher:
    return Dispatcher(registry=registry, executor=executor, shop_name="test-shop", clock=lambda: FIXED_NOW)
