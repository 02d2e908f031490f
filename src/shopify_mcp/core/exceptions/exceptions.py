"""
Custom exception classes for the Shopify MCP server.

This module defines the hierarchy of exceptions raised while loading
configuration, registering operations, normalizing arguments, talking to the
Shopify Admin API and aggregating its results. The dispatcher is the single
place where these are turned into error envelopes.
"""

from typing import List, Optional


class ShopifyMCPError(Exception):
    """Base exception for all errors raised by this package."""

    pass


class ConfigurationError(ShopifyMCPError):
    """Raised at startup when required settings are missing or invalid."""

    def __init__(self, issues: List[str]) -> None:
        self.issues = list(issues)
        super().__init__("Configuration error:\n" + "\n".join(f"  - {issue}" for issue in self.issues))


class ToolRegistrationError(ShopifyMCPError):
    """Raised when there is an error registering an operation."""

    pass


class ToolNotFoundError(ShopifyMCPError):
    """Raised when a requested operation is not in the catalog."""

    pass


class ToolValidationError(ShopifyMCPError):
    """Raised when operation arguments or a definition are invalid."""

    pass


class MissingRequiredArgument(ToolValidationError):
    """Raised when a required operation argument is absent."""

    pass


class ToolExecutionError(ShopifyMCPError):
    """Raised when an operation cannot produce a result from the upstream data."""

    pass


class UpstreamError(ShopifyMCPError):
    """Base exception for failures reported by or on the way to the Shopify API."""

    pass


class UpstreamTransportError(UpstreamError):
    """Raised when the request never got a response (network, timeout)."""

    pass


class UpstreamApiError(UpstreamError):
    """Raised for a non-2xx response or GraphQL errors embedded in a 200 response."""

    def __init__(self, message: str, status_code: Optional[int] = None, retry_after: Optional[float] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.retry_after = retry_after
