"""Response normalization, the single place tool outcomes are shaped.

Success: results pass through unchanged, except deletions, which become
``{"success": True, "message": "<Resource> <id> deleted successfully"}``.
Failure: logged once with a diagnostic string, then re-raised unchanged for the
transport to turn into a protocol error.
"""

from __future__ import annotations

import logging
from typing import Any

from retell_mcp.errors import RemoteFailure, ValidationError
from retell_mcp.mcp.registry import Effect, Operation
from retell_mcp.schemas.base import ToolInput

logger = logging.getLogger("retell_mcp.mcp.normalizer")


def normalize(operation: Operation, request: ToolInput, result: Any) -> Any:
    if operation.effect is not Effect.DELETE:
        return result
    return {
        "success": True,
        "message": operation.deleted_message.format(**request.model_dump()),
    }


def describe_failure(tool: str, exc: BaseException) -> str:
    """``"<tool>: <ErrorClass>[ (HTTP n)]: <message>"`` for logs."""
    kind = type(exc).__name__
    if isinstance(exc, RemoteFailure) and exc.status_code is not None:
        kind = f"{kind} (HTTP {exc.status_code})"
    elif isinstance(exc, ValidationError):
        kind = f"{kind} [{', '.join(exc.fields)}]"
    return f"{tool}: {kind}: {exc}"


def report_failure(tool: str, exc: BaseException) -> None:
    logger.error("%s", describe_failure(tool, exc))
