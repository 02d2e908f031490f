from .server import SERVER_NAME, SERVER_VERSION, to_mcp_tool, list_mcp_tools, build_dispatcher, build_server, serve, main

__all__ = ["SERVER_NAME", "SERVER_VERSION", "to_mcp_tool", "list_mcp_tools", "build_dispatcher", "build_server", "serve", "main"]
