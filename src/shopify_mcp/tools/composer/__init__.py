"""GraphQL query composition for catalog operations."""

from .composer import (
    ORDER_SCAN_LIMIT,
    STORE_PRODUCT_LIMIT,
    STORE_REVENUE_SAMPLE,
    INVENTORY_QUANTITY_NAME,
    INVENTORY_ADJUSTMENT_REASON,
    join_predicates,
    status_predicate,
    format_timestamp,
    created_since_predicate,
    product_missing,
    compose_get_orders,
    compose_get_financial_summary,
    compose_get_transactions,
    compose_get_inventory_levels,
    compose_get_products,
    compose_update_inventory,
    compose_get_store_summary,
    compose_get_sales_summary,
    compose_get_product_analytics,
)

__all__ = [
    "ORDER_SCAN_LIMIT",
    "STORE_PRODUCT_LIMIT",
    "STORE_REVENUE_SAMPLE",
    "INVENTORY_QUANTITY_NAME",
    "INVENTORY_ADJUSTMENT_REASON",
    "join_predicates",
    "status_predicate",
    "format_timestamp",
    "created_since_predicate",
    "product_missing",
    "compose_get_orders",
    "compose_get_financial_summary",
    "compose_get_transactions",
    "compose_get_inventory_levels",
    "compose_get_products",
    "compose_update_inventory",
    "compose_get_store_summary",
    "compose_get_sales_summary",
    "compose_get_product_analytics",
]
