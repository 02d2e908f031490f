"""Single entry point turning a named tool call into an MCP tool result."""

import asyncio
import json
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel

from .models import ComposedPlan, OperationContext, OperationHandler, ToolInvocation
from .normalizer import normalize
from .registry import OperationRegistry
from ..core.exceptions import ShopifyMCPError, ToolNotFoundError, ToolValidationError
from ..core.logger import get_logger
from ..upstream.executor import GraphQLExecutor

logger = get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def success_result(payload: Any) -> CallToolResult:
    """Wrap an aggregated payload as pretty-printed JSON text."""
    return CallToolResult(content=[TextContent(type="text", text=json.dumps(payload, indent=2))], isError=False)


def error_result(message: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=f"Error: {message}")], isError=True)


class Dispatcher:
    """
    Routes a call through normalize -> compose -> execute -> aggregate.

    The dispatcher holds no per-call state. Every failure, whatever its cause,
    is returned as an error envelope; ``dispatch`` never raises.
    """

    def __init__(
        self,
        registry: OperationRegistry,
        executor: GraphQLExecutor,
        shop_name: str = "",
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the Dispatcher.

        Args:
            registry: The operation catalog.
            executor: Upstream GraphQL capability.
            shop_name: Store name reported by the store summary.
            clock: Source of the current time for date-windowed operations.
        """
        self.registry = registry
        self.executor = executor
        self.shop_name = shop_name
        self.clock = clock

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> CallToolResult:
        """Run one tool call and wrap the outcome.

        Args:
            name: The operation name.
            arguments: The caller's raw JSON arguments.

        Returns:
            A success envelope holding the JSON result, or an error envelope.
        """
        try:
            payload = await self.run(ToolInvocation(operation_name=name, raw_arguments=dict(arguments or {})))
        except (ToolNotFoundError, ToolValidationError) as e:
            logger.warning("Rejected call to '%s': %s", name, e)
            return error_result(str(e))
        except ShopifyMCPError as e:
            logger.error("Operation '%s' failed: %s", name, e)
            return error_result(str(e))
        except Exception as e:
            logger.exception("Unexpected error in operation '%s'.", name)
            return error_result(str(e) or type(e).__name__)

        return success_result(payload)

    async def run(self, invocation: ToolInvocation) -> Any:
        """Execute an invocation and return the aggregated payload.

        Raises:
            ToolNotFoundError: If the operation is unknown.
            ToolValidationError: If the arguments are invalid or incomplete.
            UpstreamError: If Shopify could not be reached or rejected the request.
            ToolExecutionError: If the upstream data cannot be aggregated.
        """
        handler = self.registry.get(invocation.operation_name)
        arguments = normalize(handler, invocation.raw_arguments)

        context = OperationContext(shop_name=self.shop_name, now=self.clock())
        plan = handler.compose(arguments, context)
        results = await self._execute_plan(handler, plan)
        return handler.aggregate(arguments, results, context)

    async def _execute_plan(self, handler: OperationHandler, plan: ComposedPlan) -> List[Dict[str, Any]]:
        logger.debug(
            "Executing %d request(s) for '%s' (%s).",
            len(plan.requests),
            handler.name,
            "concurrent" if plan.concurrent else "sequential",
        )
        if plan.concurrent:
            return list(
                await asyncio.gather(
                    *(self.executor.execute(request.query, request.variables) for request in plan.requests)
                )
            )

        results = []
        for request in plan.requests:
            body = await self.executor.execute(request.query, request.variables)
            results.append(body)
            if plan.stop_when is not None and plan.stop_when(body):
                logger.debug(
                    "Stopping plan for '%s' after %d of %d request(s).", handler.name, len(results), len(plan.requests)
                )
                break
        return results

    def normalize(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> BaseModel:
        """Normalize arguments for a named operation without executing it."""
        return normalize(self.registry.get(name), arguments)

    def compose(self, name: str, arguments: BaseModel, now: Optional[datetime] = None) -> ComposedPlan:
        """Build the upstream plan for already normalized arguments."""
        context = OperationContext(shop_name=self.shop_name, now=now or self.clock())
        return self.registry.get(name).compose(arguments, context)
