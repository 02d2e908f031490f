"""Expose the operation catalog over MCP using the SDK's low-level stdio server."""

import asyncio
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from ..core.config import ShopifySettings, load_settings
from ..core.exceptions import ConfigurationError
from ..core.logger import get_logger, setup_logging
from ..tools import Dispatcher, OperationDefinition, OperationRegistry, build_registry
from ..upstream import GraphQLExecutor, ShopifyGraphQLClient

logger = get_logger(__name__)

__all__ = ["SERVER_NAME", "SERVER_VERSION", "to_mcp_tool", "list_mcp_tools", "build_dispatcher", "build_server", "serve", "main"]

SERVER_NAME = "mcp-shopify"
SERVER_VERSION = "1.0.0"


def to_mcp_tool(definition: OperationDefinition) -> types.Tool:
    """Convert a catalog entry to the MCP tool schema format."""
    return types.Tool(
        name=definition.name,
        description=definition.description,
        inputSchema=definition.input_schema,
        annotations=types.ToolAnnotations(
            readOnlyHint=definition.read_only,
            destructiveHint=not definition.read_only,
            idempotentHint=True,
            openWorldHint=True,
        ),
    )


def list_mcp_tools(registry: OperationRegistry) -> List[types.Tool]:
    return [to_mcp_tool(definition) for definition in registry.list()]


def build_dispatcher(
    settings: ShopifySettings, executor: GraphQLExecutor, registry: Optional[OperationRegistry] = None
) -> Dispatcher:
    """Wire the catalog to the executor."""
    return Dispatcher(
        registry=registry or build_registry(),
        executor=executor,
        shop_name=settings.shop_name,
    )


def build_server(dispatcher: Dispatcher) -> Server:
    """Create the MCP server whose tools are the dispatcher's operations.

    Input validation by the SDK is turned off: argument handling, defaults and
    error reporting all belong to the dispatcher.
    """
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return list_mcp_tools(dispatcher.registry)

    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        logger.info("Calling tool '%s'.", name)
        return await dispatcher.dispatch(name, arguments)

    return server


async def serve(settings: ShopifySettings) -> None:
    """Serve MCP over stdio until the client disconnects."""
    async with ShopifyGraphQLClient.from_settings(settings) as client:
        server = build_server(build_dispatcher(settings, client))
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Shopify MCP Server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Console entry point."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    setup_logging(settings.log_level)
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Server stopped.")
    except Exception as e:
        logger.critical("Fatal error: %s", e, exc_info=True)
        sys.exit(1)
