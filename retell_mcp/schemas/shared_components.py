"""Shared component contracts (reusable sub-flows embedded by many flows)."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator, model_validator

from retell_mcp.schemas.base import OutputRecord, ToolInput
from retell_mcp.schemas.conversation_flows import check_node_list, check_start_node


class CreateSharedComponentInput(ToolInput):
    opaque_fields = ("nodes",)

    name: str = Field(description="Name of the shared component")
    start_node_id: str = Field(description="Entry point node ID")
    nodes: list[dict[str, Any]] = Field(
        description="Array of nodes in the component (same schema as flow nodes)",
    )

    @field_validator("nodes")
    @classmethod
    def _check_nodes(cls, v):
        return check_node_list(v)

    @model_validator(mode="after")
    def _check_start_node(self):
        check_start_node(self.nodes, self.start_node_id)
        return self


class GetSharedComponentInput(ToolInput):
    component_id: str = Field(alias="componentId", description="The ID of the shared component")


class UpdateSharedComponentInput(ToolInput):
    opaque_fields = ("nodes",)

    component_id: str = Field(alias="componentId", description="The ID of the shared component to update")
    name: str | None = None
    start_node_id: str | None = None
    nodes: list[dict[str, Any]] | None = None

    @field_validator("nodes")
    @classmethod
    def _check_nodes(cls, v):
        return v if v is None else check_node_list(v)

    @model_validator(mode="after")
    def _check_start_node(self):
        check_start_node(self.nodes, self.start_node_id)
        return self


class DeleteSharedComponentInput(ToolInput):
    component_id: str = Field(alias="componentId", description="The ID of the shared component to delete")


class SharedComponentOutput(OutputRecord):
    conversation_flow_component_id: str | None = None
    name: str | None = None
    start_node_id: str | None = None
    nodes: list[dict[str, Any]] | None = None
