"""Logging utilities for the Shopify MCP server."""

import logging
import sys

_LOGGER_NAME = "shopify_mcp"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance for the package.

    Args:
        name: Optional sub-logger name. If None, returns the root package logger.

    Returns:
        The requested logger.
    """
    if name:
        if name.startswith(f"{_LOGGER_NAME}."):
            return logging.getLogger(name)
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def setup_logging(
    level: int | str = logging.INFO, format_str: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
) -> None:
    """Setup default logging configuration for the server process.

    Adds a StreamHandler on stderr to the package's root logger. stdout is
    reserved for the MCP stdio transport, so nothing may be logged there.

    Args:
        level: Logging level, either numeric or a level name such as "DEBUG".
        format_str: Log format string.
    """
    logger = logging.getLogger(_LOGGER_NAME)

    # Avoid adding multiple handlers if called multiple times
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(format_str)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)


# Set default NullHandler to avoid "No handler found" warnings
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
