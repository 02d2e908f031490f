"""Public exports for logging, configuration and the exception hierarchy."""

from .config import ShopifySettings, load_settings, DEFAULT_API_VERSION
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
from .logger import get_logger, setup_logging

__all__ = [
    "ShopifySettings",
    "load_settings",
    "DEFAULT_API_VERSION",
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
    "get_logger",
    "setup_logging",
]
