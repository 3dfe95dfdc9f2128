"""Conversation flow contracts and the opaque node view.

Flow nodes are deeply polymorphic (conversation, function, press_digit,
transfer_call, component, ...).  They are kept as raw mappings: only ``id``
(and, for the node-prompt patch, ``instruction``) is ever interpreted; every
other key is forwarded exactly as received.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import Field, field_validator, model_validator

from retell_mcp.schemas.base import OutputRecord, ToolInput


@dataclass(frozen=True)
class FlowNode:
    """Read-only view over one raw node mapping."""

    id: str
    type: str | None
    raw: Mapping[str, Any]

    @classmethod
    def from_raw(cls, raw: Any) -> FlowNode | None:
        """Return a view, or None when *raw* is not a mapping with a string id."""
        if not isinstance(raw, Mapping):
            return None
        node_id = raw.get("id")
        if not isinstance(node_id, str) or not node_id:
            return None
        node_type = raw.get("type")
        return cls(id=node_id, type=node_type if isinstance(node_type, str) else None, raw=raw)

    def with_instruction(self, instruction: Any) -> dict[str, Any]:
        """Copy of the raw node with only ``instruction`` replaced (key order kept)."""
        return {**self.raw, "instruction": instruction}


def check_node_list(nodes: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Every node needs a non-empty string id, and ids must be unique."""
    problems: list[str] = []
    seen: set[str] = set()
    for index, raw in enumerate(nodes):
        node = FlowNode.from_raw(raw)
        if node is None:
            problems.append(f"nodes[{index}] has no string 'id'")
        elif node.id in seen:
            problems.append(f"nodes[{index}] repeats id '{node.id}'")
        else:
            seen.add(node.id)
    if problems:
        raise ValueError("; ".join(problems))
    return nodes


def check_start_node(nodes: list[dict[str, Any]] | None, start_node_id: str | None) -> None:
    if nodes is None or start_node_id is None:
        return
    ids = [raw["id"] for raw in nodes]
    if start_node_id not in ids:
        raise ValueError(
            f"start_node_id '{start_node_id}' does not match any node id: {', '.join(ids) or '(no nodes)'}"
        )


class GetConversationFlowInput(ToolInput):
    conversation_flow_id: str = Field(
        alias="conversationFlowId", description="The ID of the conversation flow to retrieve",
    )
    version: int | None = Field(
        default=None, ge=0, description="Optional version number of the conversation flow to retrieve",
    )


class UpdateConversationFlowInput(ToolInput):
    opaque_fields = ("nodes",)

    conversation_flow_id: str = Field(
        alias="conversationFlowId", description="The ID of the conversation flow to update",
    )
    nodes: list[dict[str, Any]] | None = Field(
        default=None,
        description=(
            "Array of flow nodes (conversation, function, press_digit, etc.). "
            "Each node has an id, type, and type-specific fields. Replaces the whole node list."
        ),
    )
    global_prompt: str | None = Field(
        default=None, description="Global prompt appended to all conversation nodes in the flow",
    )
    start_node_id: str | None = Field(default=None, description="ID of the starting node in the flow")
    default_dynamic_variables: dict[str, str] | None = Field(
        default=None, description="Default dynamic variables as key-value pairs of strings",
    )

    @field_validator("nodes")
    @classmethod
    def _check_nodes(cls, v):
        return v if v is None else check_node_list(v)

    @model_validator(mode="after")
    def _check_start_node(self):
        check_start_node(self.nodes, self.start_node_id)
        return self


class UpdateConversationFlowNodePromptInput(ToolInput):
    conversation_flow_id: str = Field(
        alias="conversationFlowId", description="The ID of the conversation flow containing the node",
    )
    node_id: str = Field(alias="nodeId", description="The ID of the specific node to update")
    instruction: str = Field(description="The new instruction/prompt text for the node")


class DeleteConversationFlowInput(ToolInput):
    conversation_flow_id: str = Field(
        alias="conversationFlowId", description="The ID of the conversation flow to delete",
    )


class ConversationFlowOutput(OutputRecord):
    conversation_flow_id: str
    version: int | None = None
    nodes: list[dict[str, Any]] | None = None
    start_node_id: str | None = None
    global_prompt: str | None = None
    default_dynamic_variables: dict[str, str] | None = None
