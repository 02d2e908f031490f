"""Operation argument models and schema generation helpers."""

from .schema_validator import SchemaValidator
from .arguments import (
    MAX_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_DAYS,
    ORDER_STATUSES,
    FINANCIAL_STATUSES,
    PRODUCT_STATUSES,
    OperationArguments,
    GetOrdersArgs,
    GetFinancialSummaryArgs,
    GetTransactionsArgs,
    GetInventoryLevelsArgs,
    GetProductsArgs,
    UpdateInventoryArgs,
    GetStoreSummaryArgs,
    GetSalesSummaryArgs,
    GetProductAnalyticsArgs,
    clamp_limit,
    window_days,
    to_gid,
)

__all__ = [
    "SchemaValidator",
    "MAX_PAGE_SIZE",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_DAYS",
    "ORDER_STATUSES",
    "FINANCIAL_STATUSES",
    "PRODUCT_STATUSES",
    "OperationArguments",
    "GetOrdersArgs",
    "GetFinancialSummaryArgs",
    "GetTransactionsArgs",
    "GetInventoryLevelsArgs",
    "GetProductsArgs",
    "UpdateInventoryArgs",
    "GetStoreSummaryArgs",
    "GetSalesSummaryArgs",
    "GetProductAnalyticsArgs",
    "clamp_limit",
    "window_days",
    "to_gid",
]
