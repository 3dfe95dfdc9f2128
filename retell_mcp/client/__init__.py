"""Retell HTTP client."""

from retell_mcp.client.config import Settings
from retell_mcp.client.retell_client import RetellClient

__all__ = ["RetellClient", "Settings"]
