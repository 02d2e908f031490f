"""The fixed catalog of Shopify operations exposed as MCP tools."""

from . import aggregator, composer
from .registry import OperationRegistry
from .schema import (
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

ACCOUNTING_OPERATIONS = ("get_orders", "get_financial_summary", "get_transactions")
INVENTORY_OPERATIONS = ("get_inventory_levels", "get_products", "update_inventory")
ANALYTICS_OPERATIONS = ("get_store_summary", "get_sales_summary", "get_product_analytics")


def build_registry() -> OperationRegistry:
    """Create a registry holding all nine operations in catalog order."""
    registry = OperationRegistry()

    # Accounting
    registry.register(
        "get_orders",
        description=(
            "Retrieve orders from Shopify for accounting purposes. Returns order details including "
            "financial status, totals, and line items."
        ),
        args_model=GetOrdersArgs,
        compose=composer.compose_get_orders,
        aggregate=aggregator.passthrough,
    )
    registry.register(
        "get_financial_summary",
        description=(
            "Get a financial summary including total sales, order counts, and revenue metrics "
            "for a specified period."
        ),
        args_model=GetFinancialSummaryArgs,
        compose=composer.compose_get_financial_summary,
        aggregate=aggregator.aggregate_financial_summary,
    )
    registry.register(
        "get_transactions",
        description=(
            "Retrieve transaction details for a specific order, including payment information and status."
        ),
        args_model=GetTransactionsArgs,
        compose=composer.compose_get_transactions,
        aggregate=aggregator.passthrough,
        required_message="order_id is required",
    )

    # Inventory
    registry.register(
        "get_inventory_levels",
        description=(
            "Retrieve current inventory levels for products. Shows stock quantities across locations."
        ),
        args_model=GetInventoryLevelsArgs,
        compose=composer.compose_get_inventory_levels,
        aggregate=aggregator.passthrough,
    )
    registry.register(
        "get_products",
        description=(
            "Retrieve product information including variants, prices, and inventory tracking status."
        ),
        args_model=GetProductsArgs,
        compose=composer.compose_get_products,
        aggregate=aggregator.passthrough,
    )
    registry.register(
        "update_inventory",
        description="Update inventory levels for a specific product variant at a location.",
        args_model=UpdateInventoryArgs,
        compose=composer.compose_update_inventory,
        aggregate=aggregator.passthrough,
        read_only=False,
        required_message="inventory_item_id, location_id, and available are required",
    )

    # Analytics
    registry.register(
        "get_store_summary",
        description=(
            "Get a comprehensive summary of the store including product count, order statistics, "
            "and inventory overview."
        ),
        args_model=GetStoreSummaryArgs,
        compose=composer.compose_get_store_summary,
        aggregate=aggregator.aggregate_store_summary,
    )
    registry.register(
        "get_sales_summary",
        description=(
            "Get detailed sales analytics including top products, revenue trends, and customer metrics."
        ),
        args_model=GetSalesSummaryArgs,
        compose=composer.compose_get_sales_summary,
        aggregate=aggregator.aggregate_sales_summary,
    )
    registry.register(
        "get_product_analytics",
        description=(
            "Get analytics for a specific product including sales, revenue, and inventory turnover."
        ),
        args_model=GetProductAnalyticsArgs,
        compose=composer.compose_get_product_analytics,
        aggregate=aggregator.aggregate_product_analytics,
        required_message="product_id is required",
    )

    return registry
