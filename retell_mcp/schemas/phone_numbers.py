"""Phone number contracts."""

from __future__ import annotations

from pydantic import Field

from retell_mcp.schemas.base import OutputRecord, ToolInput


class CreatePhoneNumberInput(ToolInput):
    area_code: int = Field(alias="areaCode", description="Area code of the number to obtain")
    inbound_agent_id: str | None = Field(default=None, alias="inboundAgentId")
    outbound_agent_id: str | None = Field(default=None, alias="outboundAgentId")
    nickname: str | None = None
    inbound_webhook_url: str | None = Field(default=None, alias="inboundWebhookUrl")


class GetPhoneNumberInput(ToolInput):
    phone_number: str = Field(alias="phoneNumber", description="The phone number to retrieve (E.164)")


class UpdatePhoneNumberInput(ToolInput):
    phone_number: str = Field(alias="phoneNumber", description="The phone number to update (E.164)")
    inbound_agent_id: str | None = Field(default=None, alias="inboundAgentId")
    outbound_agent_id: str | None = Field(default=None, alias="outboundAgentId")
    nickname: str | None = None
    inbound_webhook_url: str | None = Field(default=None, alias="inboundWebhookUrl")


class DeletePhoneNumberInput(ToolInput):
    phone_number: str = Field(alias="phoneNumber", description="The phone number to release (E.164)")


class PhoneNumberOutput(OutputRecord):
    phone_number: str
    phone_number_pretty: str | None = None
    phone_number_type: str | None = None
    inbound_agent_id: str | None = None
    outbound_agent_id: str | None = None
    area_code: int | None = None
    nickname: str | None = None
    inbound_webhook_url: str | None = None
    last_modification_timestamp: int
