"""Export the exception hierarchy used across configuration, dispatch and upstream paths."""

from .exceptions import (
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

__all__ = [
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
]
