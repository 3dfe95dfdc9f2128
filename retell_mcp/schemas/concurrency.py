"""Concurrency status contract (read-only)."""

from __future__ import annotations

from retell_mcp.schemas.base import OutputRecord


class ConcurrencyOutput(OutputRecord):
    current_concurrency: int
    concurrency_limit: int
    base_concurrency: int | None = None
    purchased_concurrency: int | None = None
    concurrency_burst_enabled: bool | None = None
