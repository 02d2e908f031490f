"""Shopify MCP - Shopify Admin API operations exposed as Model Context Protocol tools."""

from .core import (
    ShopifySettings,
    load_settings,
    get_logger,
    setup_logging,
    ShopifyMCPError,
    ConfigurationError,
    ToolRegistrationError,
    ToolNotFoundError,
    ToolValidationError,
    MissingRequiredArgument,
    ToolExecutionError,
    UpstreamError,
    UpstreamTransportError,
    UpstreamApiError,
)
from .tools import (
    OperationDefinition,
    OperationRegistry,
    Dispatcher,
    build_registry,
)
from .upstream import GraphQLExecutor, ShopifyGraphQLClient

__all__ = [
    "ShopifySettings",
    "load_settings",
    "get_logger",
    "setup_logging",
    "ShopifyMCPError",
    "ConfigurationError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ToolValidationError",
    "MissingRequiredArgument",
    "ToolExecutionError",
    "UpstreamError",
    "UpstreamTransportError",
    "UpstreamApiError",
    "OperationDefinition",
    "OperationRegistry",
    "Dispatcher",
    "build_registry",
    "GraphQLExecutor",
    "ShopifyGraphQLClient",
]
