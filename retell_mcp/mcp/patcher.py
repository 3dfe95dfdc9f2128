"""Single-node instruction patch for conversation flows.

The Retell API has no per-node update, so the patch is a read-modify-write:

    GET   /get-conversation-flow/{id}      fetch the whole flow
          locate the node, replace its ``instruction``
    PATCH /update-conversation-flow/{id}   resubmit the *entire* node list

The sequence is not atomic.  Two concurrent patches on the same flow both
start from the same snapshot; the later PATCH wins and silently drops the
earlier change, even when they touched different nodes.
"""

from __future__ import annotations

import logging
from typing import Any

from retell_mcp.client import RetellClient
from retell_mcp.errors import LogicError, NotFound
from retell_mcp.mcp.gateway import Endpoint, GenericCall
from retell_mcp.schemas.conversation_flows import FlowNode, UpdateConversationFlowNodePromptInput

logger = logging.getLogger("retell_mcp.mcp.patcher")

FETCH_FLOW = GenericCall("GET", "/get-conversation-flow/{conversation_flow_id}")
SUBMIT_FLOW = GenericCall("PATCH", "/update-conversation-flow/{conversation_flow_id}")


def replace_node_instruction(nodes: Any, node_id: str, instruction: str) -> list[Any]:
    """Return a copy of *nodes* where only node *node_id* has a new ``instruction``.

    Order and every other field are preserved; *nodes* itself is not mutated.
    The first node with a matching id wins.

    Raises:
        LogicError: *nodes* is absent, not a list, or empty.
        NotFound:   no node has *node_id*; the message lists every known id.
    """
    if not isinstance(nodes, list) or not nodes:
        raise LogicError(f"Conversation flow has no nodes. Cannot find node {node_id}.")

    views = [FlowNode.from_raw(raw) for raw in nodes]
    for index, view in enumerate(views):
        if view is not None and view.id == node_id:
            patched = list(nodes)
            patched[index] = view.with_instruction(instruction)
            return patched

    known = [view.id for view in views if view is not None]
    raise NotFound(
        f"Node {node_id} not found in conversation flow. Available node IDs: {', '.join(known)}",
        known_ids=known,
    )


class NodeInstructionPatch(Endpoint):
    """Handler for ``update_conversation_flow_node_prompt``."""

    async def execute(self, client: RetellClient, request: UpdateConversationFlowNodePromptInput) -> Any:
        ids = {"conversation_flow_id": request.conversation_flow_id}
        step = "fetch"
        try:
            flow = await FETCH_FLOW.send(client, ids)
            step = "locate"
            nodes = replace_node_instruction(
                flow.get("nodes") if isinstance(flow, dict) else None,
                request.node_id,
                request.instruction,
            )
            step = "submit"
            return await SUBMIT_FLOW.send(client, ids, body={"nodes": nodes})
        except Exception:
            logger.error(
                "Node prompt patch of %s in flow %s failed at step '%s'",
                request.node_id, request.conversation_flow_id, step,
            )
            raise

    def describe(self) -> str:
        return f"{FETCH_FLOW.describe()} + {SUBMIT_FLOW.describe()}"
