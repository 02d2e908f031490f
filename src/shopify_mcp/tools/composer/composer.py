"""Build the upstream GraphQL requests for each operation.

Every function here is pure: the same normalized arguments and context always
produce an identical plan.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional

from . import queries
from ..models import ComposedPlan, ComposedRequest, OperationContext
from ..schema import (
    MAX_PAGE_SIZE,
    GetFinancialSummaryArgs,
    GetInventoryLevelsArgs,
    GetOrdersArgs,
    GetProductAnalyticsArgs,
    GetProductsArgs,
    GetSalesSummaryArgs,
    GetStoreSummaryArgs,
    GetTransactionsArgs,
    UpdateInventoryArgs,
)

# Orders scanned by the summaries; a single page, never paginated further
ORDER_SCAN_LIMIT = MAX_PAGE_SIZE
STORE_PRODUCT_LIMIT = MAX_PAGE_SIZE
STORE_REVENUE_SAMPLE = 100

INVENTORY_QUANTITY_NAME = "available"
INVENTORY_ADJUSTMENT_REASON = "correction"


def join_predicates(clauses: Iterable[Optional[str]]) -> str:
    """Combine search predicates with AND, skipping empty ones."""
    return " AND ".join(clause for clause in clauses if clause)


def status_predicate(field: str, value: Optional[str]) -> Optional[str]:
    """``field:value``, or None when the value means "no filter"."""
    if not value or value == "any":
        return None
    return f"{field}:{value}"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def created_since_predicate(now: datetime, days: int) -> str:
    """Inclusive lower bound on order creation, ``days`` before ``now``."""
    since = now - timedelta(days=days)
    return f"created_at:>='{format_timestamp(since)}'"


def _single(document: str, **variables: object) -> ComposedPlan:
    clean = {key: value for key, value in variables.items() if value not in (None, "")}
    return ComposedPlan(requests=(ComposedRequest(query=document, variables=clean),))


def compose_get_orders(args: GetOrdersArgs, context: OperationContext) -> ComposedPlan:
    search = join_predicates(
        [
            status_predicate("status", args.status),
            status_predicate("financial_status", args.financial_status),
        ]
    )
    return _single(queries.ORDERS_QUERY, first=args.limit, query=search)


def compose_get_financial_summary(args: GetFinancialSummaryArgs, context: OperationContext) -> ComposedPlan:
    return _single(
        queries.FINANCIAL_SUMMARY_QUERY,
        first=ORDER_SCAN_LIMIT,
        query=created_since_predicate(context.now, args.days),
    )


def compose_get_transactions(args: GetTransactionsArgs, context: OperationContext) -> ComposedPlan:
    return _single(queries.TRANSACTIONS_QUERY, id=args.order_id)


def compose_get_inventory_levels(args: GetInventoryLevelsArgs, context: OperationContext) -> ComposedPlan:
    return _single(queries.INVENTORY_LEVELS_QUERY, first=args.limit, locationId=args.location_id)


def compose_get_products(args: GetProductsArgs, context: OperationContext) -> ComposedPlan:
    return _single(queries.PRODUCTS_QUERY, first=args.limit, query=f"status:{args.status}")


def compose_update_inventory(args: UpdateInventoryArgs, context: OperationContext) -> ComposedPlan:
    variables = {
        "input": {
            "reason": INVENTORY_ADJUSTMENT_REASON,
            "quantities": [
                {
                    "inventoryItemId": args.inventory_item_id,
                    "locationId": args.location_id,
                    "name": INVENTORY_QUANTITY_NAME,
                    "quantity": args.available,
                }
            ],
        }
    }
    return ComposedPlan(
        requests=(ComposedRequest(query=queries.INVENTORY_SET_QUANTITIES_MUTATION, variables=variables),)
    )


def compose_get_store_summary(args: GetStoreSummaryArgs, context: OperationContext) -> ComposedPlan:
    return ComposedPlan(
        requests=(
            ComposedRequest(query=queries.STORE_PRODUCTS_QUERY, variables={"first": STORE_PRODUCT_LIMIT}),
            ComposedRequest(query=queries.LATEST_ORDER_QUERY),
            ComposedRequest(query=queries.RECENT_ORDERS_QUERY, variables={"first": STORE_REVENUE_SAMPLE}),
        ),
        concurrent=True,
    )


def compose_get_sales_summary(args: GetSalesSummaryArgs, context: OperationContext) -> ComposedPlan:
    return _single(
        queries.SALES_SUMMARY_QUERY,
        first=ORDER_SCAN_LIMIT,
        query=created_since_predicate(context.now, args.days),
    )


def product_missing(body: Dict[str, Any]) -> bool:
    """True when a product lookup came back empty."""
    return not (body.get("data") or {}).get("product")


def compose_get_product_analytics(args: GetProductAnalyticsArgs, context: OperationContext) -> ComposedPlan:
    # The order scan is skipped when the product does not exist
    return ComposedPlan(
        requests=(
            ComposedRequest(query=queries.PRODUCT_QUERY, variables={"id": args.product_id}),
            ComposedRequest(query=queries.PRODUCT_ORDERS_QUERY, variables={"first": ORDER_SCAN_LIMIT}),
        ),
        concurrent=False,
        stop_when=product_missing,
    )
