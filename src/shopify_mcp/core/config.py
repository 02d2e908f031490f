"""Load and validate the settings the server needs at startup."""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError
from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_API_VERSION = "2024-10"

# Environment variable -> settings field
_ENV_FIELDS = {
    "SHOPIFY_SHOP_NAME": "shop_name",
    "SHOPIFY_ACCESS_TOKEN": "access_token",
    "SHOPIFY_API_VERSION": "api_version",
    "SHOPIFY_TIMEOUT": "timeout",
    "SHOPIFY_MAX_RETRIES": "max_retries",
    "SHOPIFY_MCP_LOG_LEVEL": "log_level",
}
_FIELD_ENV = {field: env for env, field in _ENV_FIELDS.items()}


class ShopifySettings(BaseModel):
    """Validated process settings.

    Attributes:
        shop_name: Shop handle (``my-store``) or full ``*.myshopify.com`` domain.
        access_token: Admin API access token of the custom app.
        api_version: Admin API version segment of the GraphQL endpoint.
        timeout: Per-request timeout in seconds.
        max_retries: Retries for throttled or transient upstream failures.
        log_level: Level name for the package logger.
    """

    model_config = ConfigDict(frozen=True)

    shop_name: str = Field(min_length=1)
    access_token: str = Field(min_length=1, repr=False)
    api_version: str = DEFAULT_API_VERSION
    timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=0)
    log_level: str = "INFO"

    @property
    def shop_domain(self) -> str:
        """The ``<shop>.myshopify.com`` host the API lives on."""
        if "." in self.shop_name:
            return self.shop_name
        return f"{self.shop_name}.myshopify.com"


def _describe_issue(error: dict) -> str:
    field = str(error["loc"][0]) if error.get("loc") else "settings"
    env_name = _FIELD_ENV.get(field, field)
    if error["type"] in ("missing", "string_too_short"):
        return f"{env_name} is required"
    return f"{env_name}: {error['msg']}"


def load_settings(env: Optional[Mapping[str, str]] = None) -> ShopifySettings:
    """Build settings from the environment.

    When ``env`` is omitted, a ``.env`` file is loaded first (existing
    variables win) and ``os.environ`` is read.

    Args:
        env: Optional mapping to read instead of the process environment.

    Returns:
        The validated settings.

    Raises:
        ConfigurationError: Listing every missing or invalid variable.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    raw = {field: env[name] for name, field in _ENV_FIELDS.items() if env.get(name) not in (None, "")}
    # Required fields are always passed so blanks report as "required"
    raw.setdefault("shop_name", "")
    raw.setdefault("access_token", "")

    try:
        settings = ShopifySettings(**raw)
    except ValidationError as e:
        issues = [_describe_issue(err) for err in e.errors()]
        logger.error("Invalid configuration: %s", "; ".join(issues))
        raise ConfigurationError(issues) from e

    logger.debug("Loaded settings for shop '%s' (API %s).", settings.shop_domain, settings.api_version)
    return settings
