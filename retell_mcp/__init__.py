"""Retell AI MCP tool server: a validated tool catalog over the Retell REST API."""

__version__ = "0.3.0"
