"""The capability the dispatcher needs from whatever talks to Shopify."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class GraphQLExecutor(Protocol):
    """Sends one GraphQL document upstream.

    Implementations return the decoded response body (``{"data": ...}``) and
    raise ``UpstreamTransportError`` or ``UpstreamApiError`` on failure. They
    must be safe to call concurrently.
    """

    async def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]: ...
