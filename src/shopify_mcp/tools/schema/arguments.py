"""Argument models for every catalog operation.

Each model is both the source of the advertised input schema and the
normalizer for caller arguments: defaults are applied, page sizes clamped and
numeric Shopify IDs promoted to global IDs. Enum-like fields advertise their
allowed values but accept anything, mirroring the upstream search syntax.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_PAGE_SIZE = 250
DEFAULT_PAGE_SIZE = 50
DEFAULT_DAYS = 30

ORDER_STATUSES = ["any", "open", "closed", "cancelled"]
FINANCIAL_STATUSES = [
    "any",
    "authorized",
    "pending",
    "paid",
    "partially_paid",
    "refunded",
    "voided",
    "partially_refunded",
    "unpaid",
]
PRODUCT_STATUSES = ["active", "archived", "draft"]


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("must be a number")
    try:
        return int(float(value))
    except (TypeError, ValueError):
        raise ValueError("must be a number") from None


def clamp_limit(value: Any) -> int:
    """Bound a requested page size to [1, MAX_PAGE_SIZE]; falsy means the default."""
    if not value:
        return DEFAULT_PAGE_SIZE
    return max(1, min(_as_int(value), MAX_PAGE_SIZE))


def window_days(value: Any) -> int:
    """Resolve a day window; falsy or negative means the default."""
    if not value:
        return DEFAULT_DAYS
    days = _as_int(value)
    return days if days > 0 else DEFAULT_DAYS


def to_gid(resource: str, value: Any) -> Any:
    """Promote a bare numeric ID to ``gid://shopify/<resource>/<id>``."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        value = str(int(value))
    if not isinstance(value, str):
        return value
    text = value.strip()
    if text.isdigit():
        return f"gid://shopify/{resource}/{text}"
    return text


class OperationArguments(BaseModel):
    """Base for normalized arguments: immutable, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class GetOrdersArgs(OperationArguments):
    status: str = Field(
        default="any",
        description="Filter orders by status: any, open, closed, cancelled",
        json_schema_extra={"enum": ORDER_STATUSES},
    )
    financial_status: Optional[str] = Field(
        default=None,
        description=(
            "Filter by financial status: any, authorized, pending, paid, partially_paid, "
            "refunded, voided, partially_refunded, unpaid"
        ),
        json_schema_extra={"enum": FINANCIAL_STATUSES},
    )
    limit: int = Field(default=DEFAULT_PAGE_SIZE, description="Maximum number of orders to return (1-250)")

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> Any:
        return value or "any"

    @field_validator("limit", mode="before")
    @classmethod
    def _clamp_limit(cls, value: Any) -> int:
        return clamp_limit(value)


class DayWindowArgs(OperationArguments):
    days: int = Field(default=DEFAULT_DAYS, description="Number of days to include in the summary")

    @field_validator("days", mode="before")
    @classmethod
    def _window(cls, value: Any) -> int:
        return window_days(value)


class GetFinancialSummaryArgs(DayWindowArgs):
    pass


class GetSalesSummaryArgs(DayWindowArgs):
    days: int = Field(default=DEFAULT_DAYS, description="Number of days to analyze")


class GetTransactionsArgs(OperationArguments):
    order_id: str = Field(min_length=1, description="The ID of the order to get transactions for")

    @field_validator("order_id", mode="before")
    @classmethod
    def _order_gid(cls, value: Any) -> Any:
        return to_gid("Order", value)


class GetInventoryLevelsArgs(OperationArguments):
    location_id: Optional[str] = Field(default=None, description="Filter by specific location ID")
    limit: int = Field(default=DEFAULT_PAGE_SIZE, description="Maximum number of items to return")

    @field_validator("location_id", mode="before")
    @classmethod
    def _location_gid(cls, value: Any) -> Any:
        return to_gid("Location", value) or None

    @field_validator("limit", mode="before")
    @classmethod
    def _clamp_limit(cls, value: Any) -> int:
        return clamp_limit(value)


class GetProductsArgs(OperationArguments):
    status: str = Field(
        default="active",
        description="Filter by product status",
        json_schema_extra={"enum": PRODUCT_STATUSES},
    )
    limit: int = Field(default=DEFAULT_PAGE_SIZE, description="Maximum number of products to return")

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> Any:
        return value or "active"

    @field_validator("limit", mode="before")
    @classmethod
    def _clamp_limit(cls, value: Any) -> int:
        return clamp_limit(value)


class UpdateInventoryArgs(OperationArguments):
    inventory_item_id: str = Field(min_length=1, description="The inventory item ID to update")
    location_id: str = Field(min_length=1, description="The location ID where inventory should be updated")
    available: int = Field(description="The new available quantity")

    @field_validator("inventory_item_id", mode="before")
    @classmethod
    def _item_gid(cls, value: Any) -> Any:
        return to_gid("InventoryItem", value)

    @field_validator("location_id", mode="before")
    @classmethod
    def _location_gid(cls, value: Any) -> Any:
        return to_gid("Location", value)


class GetStoreSummaryArgs(OperationArguments):
    pass


class GetProductAnalyticsArgs(OperationArguments):
    product_id: str = Field(min_length=1, description="The product ID to analyze")

    @field_validator("product_id", mode="before")
    @classmethod
    def _product_gid(cls, value: Any) -> Any:
        return to_gid("Product", value)
