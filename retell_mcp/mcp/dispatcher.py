"""Tool dispatcher: name lookup, argument validation, execution, normalization.

    dispatch(name, arguments)
      1. look up the Operation            (unknown name  -> NotFound)
      2. validate the arguments           (contract break -> ValidationError, no network call)
      3. run the handler against Retell   (RemoteFailure / NotFound / LogicError)
      4. normalize the result             (deletes -> {"success", "message"})

Failures are reported once, here, and re-raised to the transport.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from retell_mcp.client import RetellClient
from retell_mcp.errors import NotFound
from retell_mcp.mcp.normalizer import normalize, report_failure
from retell_mcp.mcp.registry import OPERATIONS, Operation
from retell_mcp.mcp.validator import validate_arguments

logger = logging.getLogger("retell_mcp.mcp.dispatcher")


class ToolDispatcher:
    """Routes MCP tool calls to Retell through the operation registry."""

    def __init__(self, client: RetellClient, operations: Mapping[str, Operation] = OPERATIONS) -> None:
        self._client = client
        self._operations = operations

    @property
    def operations(self) -> Mapping[str, Operation]:
        return self._operations

    async def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        operation = self._operations.get(name)
        if operation is None:
            exc = NotFound(f"Unknown tool: {name}", known_ids=sorted(self._operations))
            report_failure(name, exc)
            raise exc

        try:
            request = validate_arguments(name, operation.input_model, arguments)
            logger.debug("%s -> %s", name, operation.handler.describe())
            result = await operation.handler.execute(self._client, request)
        except Exception as exc:
            report_failure(name, exc)
            raise

        return normalize(operation, request, result)
