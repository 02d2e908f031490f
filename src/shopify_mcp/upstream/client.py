"""Shopify Admin GraphQL client used as the production executor."""

import asyncio
from types import TracebackType
from typing import Any, Dict, List, Optional, Type

import httpx

from ..core.config import DEFAULT_API_VERSION, ShopifySettings
from ..core.exceptions import UpstreamApiError, UpstreamTransportError
from ..core.logger import get_logger

logger = get_logger(__name__)

__all__ = ["ShopifyGraphQLClient"]

_RETRYABLE_STATUS = {429, 500, 502, 503, 504}


def _retry_after(response: httpx.Response) -> Optional[float]:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return max(0.0, float(value))
    except ValueError:
        return None


def _error_messages(errors: Any) -> List[str]:
    if isinstance(errors, list):
        return [str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors]
    return [str(errors)]


def _is_throttled(errors: Any) -> bool:
    if not isinstance(errors, list):
        return False
    return any(
        isinstance(e, dict) and (e.get("extensions") or {}).get("code") == "THROTTLED" for e in errors
    )


class ShopifyGraphQLClient:
    """Executes GraphQL documents against one shop's Admin API.

    Throttling (HTTP 429 or a ``THROTTLED`` GraphQL error), 5xx responses and
    transport failures are retried with exponential backoff, honouring the
    ``Retry-After`` header when Shopify sends one. Anything else is raised at
    once.
    """

    def __init__(
        self,
        shop_domain: str,
        access_token: str,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 30.0,
        max_retries: int = 3,
        base_retry_delay: float = 1.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the client.

        Args:
            shop_domain: ``<shop>.myshopify.com`` host.
            access_token: Admin API access token.
            api_version: Admin API version, e.g. ``2024-10``.
            timeout: Request timeout in seconds.
            max_retries: Retries after the first attempt for retryable failures.
            base_retry_delay: First backoff delay in seconds; doubled per retry.
            http_client: Optional preconfigured ``httpx.AsyncClient`` (tests, proxies).
        """
        self.url = f"https://{shop_domain}/admin/api/{api_version}/graphql.json"
        self.max_retries = max_retries
        self.base_retry_delay = base_retry_delay
        self._headers = {
            "X-Shopify-Access-Token": access_token,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: ShopifySettings) -> "ShopifyGraphQLClient":
        return cls(
            shop_domain=settings.shop_domain,
            access_token=settings.access_token,
            api_version=settings.api_version,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
        )

    async def __aenter__(self) -> "ShopifyGraphQLClient":
        return self

    async def __aexit__(
        self, exc_type: Optional[Type[BaseException]], exc_val: Optional[BaseException], exc_tb: Optional[TracebackType]
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Send a GraphQL document, retrying throttled and transient failures.

        Args:
            query: The GraphQL query or mutation text.
            variables: GraphQL variables.

        Returns:
            The decoded response body.

        Raises:
            UpstreamTransportError: If the request could not be sent or timed out.
            UpstreamApiError: On a non-2xx status or GraphQL errors in the body.
        """
        delay = self.base_retry_delay
        for attempt in range(self.max_retries + 1):
            try:
                return await self._send(query, variables or {})
            except (UpstreamTransportError, UpstreamApiError) as e:
                if attempt == self.max_retries or not self._should_retry(e):
                    raise

                wait = getattr(e, "retry_after", None)
                if wait is None:
                    wait = delay
                logger.warning(
                    "Shopify request failed (Retry: %d/%d): %s. Waiting %ss...", attempt + 1, self.max_retries, e, wait
                )
                await asyncio.sleep(wait)
                delay *= 2  # Exponential backoff

    @staticmethod
    def _should_retry(error: Exception) -> bool:
        if isinstance(error, UpstreamTransportError):
            return True
        if isinstance(error, UpstreamApiError):
            return error.status_code in _RETRYABLE_STATUS
        return False

    async def _send(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        logger.debug("POST %s", self.url)
        try:
            response = await self._client.post(
                self.url, headers=self._headers, json={"query": query, "variables": variables}
            )
        except httpx.TimeoutException as e:
            raise UpstreamTransportError(f"Request to Shopify timed out: {e}") from e
        except httpx.TransportError as e:
            raise UpstreamTransportError(f"Could not reach Shopify: {e}") from e

        if response.status_code >= 400:
            raise UpstreamApiError(
                f"Shopify API returned HTTP {response.status_code}: {response.reason_phrase}",
                status_code=response.status_code,
                retry_after=_retry_after(response),
            )

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamApiError("Shopify API returned a non-JSON response", status_code=response.status_code) from e

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            message = "; ".join(_error_messages(errors))
            # A throttled query is reported in a 200 body; treat it like a 429
            status = 429 if _is_throttled(errors) else response.status_code
            raise UpstreamApiError(f"GraphQL error: {message}", status_code=status, retry_after=_retry_after(response))

        return body
