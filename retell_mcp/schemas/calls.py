"""Call contracts (phone and web calls)."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from retell_mcp.schemas.base import OutputRecord, ToolInput

CallStatus = Literal["registered", "ongoing", "in_progress", "ended", "completed", "error", "failed", "canceled"]


class CreatePhoneCallInput(ToolInput):
    from_number: str = Field(alias="fromNumber", description="The phone number to call from")
    to_number: str = Field(alias="toNumber", description="The phone number to call to")
    override_agent_id: str | None = Field(
        default=None,
        alias="overrideAgentId",
        description="For this particular call, override the agent used with this agent id",
    )
    override_agent_version: int | None = Field(
        default=None,
        alias="overrideAgentVersion",
        description="For this particular call, override the agent version used with this version",
    )
    direction: Literal["inbound", "outbound"] = "outbound"
    metadata: dict[str, str] | None = None
    retell_llm_dynamic_variables: dict[str, str] | None = Field(
        default=None,
        alias="retellLlmDynamicVariables",
        description="Dynamic variables to pass to the LLM in key-value pairs",
    )
    opt_out_sensitive_data_storage: bool | None = Field(default=None, alias="optOutSensitiveDataStorage")
    opt_in_signed_url: bool | None = Field(default=None, alias="optInSignedUrl")


class CreateWebCallInput(ToolInput):
    agent_id: str = Field(alias="agentId", description="The ID of the agent to use for the call")
    metadata: dict[str, str] | None = None
    retell_llm_dynamic_variables: dict[str, str] | None = Field(
        default=None,
        alias="retellLlmDynamicVariables",
        description="Dynamic variables to pass to the LLM in key-value pairs",
    )
    opt_out_sensitive_data_storage: bool | None = Field(default=None, alias="optOutSensitiveDataStorage")
    opt_in_signed_url: bool | None = Field(default=None, alias="optInSignedUrl")


class GetCallInput(ToolInput):
    call_id: str = Field(alias="callId", description="The ID of the call to retrieve")


class ListCallsInput(ToolInput):
    agent_id: str | None = Field(default=None, alias="agentId", description="Filter calls by agent ID")
    start_timestamp: int | None = Field(
        default=None, alias="startTimestamp", description="Only calls started after this timestamp (ms)",
    )
    end_timestamp: int | None = Field(
        default=None, alias="endTimestamp", description="Only calls started before this timestamp (ms)",
    )
    sort_order: Literal["ascending", "descending"] | None = Field(default=None, alias="sortOrder")
    limit: int | None = Field(default=None, ge=1, le=1000, description="Maximum number of calls to return")
    pagination_key: str | None = Field(
        default=None,
        alias="paginationKey",
        description="call_id of the last call from the previous page",
    )


class UpdateCallInput(ToolInput):
    call_id: str = Field(alias="callId", description="The ID of the call to update")
    metadata: dict[str, str] | None = None
    override_dynamic_variables: dict[str, str] | None = Field(default=None, alias="dynamicVariables")


class DeleteCallInput(ToolInput):
    call_id: str = Field(alias="callId", description="The ID of the call to delete")


class CallAnalysis(OutputRecord):
    call_summary: str | None = None
    in_voicemail: bool | None = None
    user_sentiment: Literal["Negative", "Positive", "Neutral", "Unknown"] | None = None
    call_successful: bool | None = None
    custom_analysis_data: dict[str, Any] | None = None


class ProductCost(OutputRecord):
    product: str
    unitPrice: float
    cost: float


class CallCost(OutputRecord):
    product_costs: list[ProductCost]
    total_duration_seconds: float
    total_duration_unit_price: float
    total_one_time_price: float
    combined_cost: float


class CallOutput(OutputRecord):
    call_id: str
    call_type: Literal["phone_call", "web_call"]
    agent_id: str
    version: int | None = None
    call_status: CallStatus
    metadata: dict[str, Any] | None = None
    start_timestamp: int | None = None
    end_timestamp: int | None = None
    transcript: str | None = None
    recording_url: str | None = None
    disconnection_reason: str | None = None
    call_analysis: CallAnalysis | None = None
    call_cost: CallCost | None = None
