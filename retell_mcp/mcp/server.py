"""MCP server exposing the Retell tool catalog over the MCP protocol.

Uses the low-level ``mcp.server.Server`` with a single ``call_tool`` handler
driven by ``OPERATIONS``.  Argument validation is done by the dispatcher
against the pydantic contracts, so the library's own input check is disabled.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp import types
from mcp.server import Server

from retell_mcp.mcp.dispatcher import ToolDispatcher
from retell_mcp.mcp.registry import Operation

logger = logging.getLogger(__name__)


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Create an MCP Server wired to *dispatcher*.

    Every registered operation is listed; adding one to the catalog makes it
    available here.  Exceptions raised by the dispatcher reach the client as
    ``isError`` tool results.
    """
    server = Server("retell")

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [_tool(op) for op in dispatcher.operations.values()]

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None = None) -> list[types.TextContent]:
        result = await dispatcher.dispatch(name, arguments)
        return [types.TextContent(type="text", text=_serialize(result))]

    return server


def _tool(op: Operation) -> types.Tool:
    return types.Tool(
        name=op.name,
        description=op.description,
        inputSchema=op.input_schema(),
        annotations=types.ToolAnnotations(
            readOnlyHint=op.read_only,
            destructiveHint=op.destructive,
        ),
    )


def _serialize(result: Any) -> str:
    """Serialize a tool result to JSON for MCP transport."""
    return json.dumps(result, default=str)
