from shopify_mcp import OperationRegistry
from shopify_mcp.tools.catalog import ACCOUNTING_OPERATIONS, ANALYTICS_OPERATIONS, INVENTORY_OPERATIONS

EXPECTED_ORDER = [
    "get_orders",
    "get_financial_summary",
    "get_transactions",
    "get_inventory_levels",
    "get_products",
    "update_inventory",
    "get_store_summary",
    "get_sales_summary",
    "get_product_analytics",
]


def test_catalog_lists_nine_operations_in_order(registry: OperationRegistry) -> None:
    assert [d.name for d in registry.list()] == EXPECTED_ORDER
    assert list(ACCOUNTING_OPERATIONS + INVENTORY_OPERATIONS + ANALYTICS_OPERATIONS) == EXPECTED_ORDER


def test_catalog_is_stable_across_builds(registry: OperationRegistry) -> None:
    from shopify_mcp import build_registry

    assert build_registry().list() == registry.list()


def test_only_update_inventory_mutates(registry: OperationRegistry) -> None:
    mutating = [d.name for d in registry.list() if not d.read_only]
    assert mutating == ["update_inventory"]


def test_every_schema_is_an_object(registry: OperationRegistry) -> None:
    for definition in registry.list():
        assert definition.input_schema["type"] == "object"
        assert isinstance(definition.input_schema["properties"], dict)
        assert definition.description


def test_required_fields(registry: OperationRegistry) -> None:
    required = {d.name: sorted(d.input_schema.get("required", [])) for d in registry.list()}

    assert required["get_transactions"] == ["order_id"]
    assert required["update_inventory"] == ["available", "inventory_item_id", "location_id"]
    assert required["get_product_analytics"] == ["product_id"]
    assert required["get_orders"] == []
    assert required["get_store_summary"] == []


def test_get_orders_schema_advertises_enums_and_defaults(registry: OperationRegistry) -> None:
    props = registry.get("get_orders").definition.input_schema["properties"]

    assert props["status"]["enum"] == ["any", "open", "closed", "cancelled"]
    assert props["status"]["default"] == "any"
    assert "paid" in props["financial_status"]["enum"]
    assert props["financial_status"]["type"] == "string"
    assert props["limit"]["type"] == "integer"
    assert props["limit"]["default"] == 50


def test_product_and_day_window_schemas(registry: OperationRegistry) -> None:
    products = registry.get("get_products").definition.input_schema["properties"]
    assert products["status"]["enum"] == ["active", "archived", "draft"]
    assert products["status"]["default"] == "active"

    for name in ("get_financial_summary", "get_sales_summary"):
        days = registry.get(name).definition.input_schema["properties"]["days"]
        assert days["type"] == "integer"
        assert days["default"] == 30


def test_store_summary_takes_no_arguments(registry: OperationRegistry) -> None:
    assert registry.get("get_store_summary").definition.input_schema["properties"] == {}
