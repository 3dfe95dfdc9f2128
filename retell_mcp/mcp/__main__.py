"""Entry point: ``python -m retell_mcp.mcp`` (console script ``retell-mcp``)

Starts the Retell MCP server over stdio so MCP clients (Claude Desktop,
Cursor, ...) can discover all 48 tools.

Environment variables
---------------------
RETELL_API_KEY           Retell API key (sent as a Bearer token).
RETELL_API_ENDPOINT      Retell base URL (default ``https://api.retellai.com``).
RETELL_TIMEOUT           Request timeout in seconds (default ``60``).
RETELL_MCP_LOG_LEVEL     Python log level (default ``WARNING``).
"""

from __future__ import annotations

import asyncio
import logging
import os

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=os.environ.get("RETELL_MCP_LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

from mcp.server.stdio import stdio_server  # noqa: E402

from retell_mcp.client import RetellClient, Settings  # noqa: E402
from retell_mcp.mcp.dispatcher import ToolDispatcher  # noqa: E402
from retell_mcp.mcp.server import create_server  # noqa: E402

logger = logging.getLogger("retell_mcp.mcp")


async def serve() -> None:
    settings = Settings.from_env()
    if not settings.api_key:
        logger.warning("RETELL_API_KEY is not set; Retell will reject every call")
    client = RetellClient(settings)
    try:
        server = create_server(ToolDispatcher(client))
        async with stdio_server() as (read_stream, write_stream):
            init_options = server.create_initialization_options()
            await server.run(read_stream, write_stream, init_options)
    finally:
        await client.close()


def main() -> None:
    asyncio.run(serve())


if __name__ == "__main__":
    main()
