"""Retell MCP tool surface: registry, dispatcher and stdio server."""

from retell_mcp.mcp.dispatcher import ToolDispatcher
from retell_mcp.mcp.registry import OPERATIONS, TOOL_CATALOG
from retell_mcp.mcp.server import create_server

__all__ = ["OPERATIONS", "TOOL_CATALOG", "ToolDispatcher", "create_server"]
