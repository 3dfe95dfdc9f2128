"""Knowledge base contracts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from retell_mcp.schemas.base import OutputRecord, ToolInput
from retell_mcp.schemas.variants import KnowledgeBaseSource


class KnowledgeBaseText(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    text: str


class CreateKnowledgeBaseInput(ToolInput):
    knowledge_base_name: str = Field(alias="name", max_length=40, description="Name of the knowledge base")
    knowledge_base_texts: list[KnowledgeBaseText] | None = Field(
        default=None, alias="texts", description="Initial text documents",
    )
    knowledge_base_urls: list[str] | None = Field(default=None, alias="urls", description="Initial URLs to crawl")
    enable_auto_refresh: bool | None = Field(
        default=None, alias="enableAutoRefresh", description="Re-crawl URL sources every 12 hours",
    )


class GetKnowledgeBaseInput(ToolInput):
    knowledge_base_id: str = Field(alias="knowledgeBaseId", description="The ID of the knowledge base to retrieve")


class DeleteKnowledgeBaseInput(ToolInput):
    knowledge_base_id: str = Field(alias="knowledgeBaseId", description="The ID of the knowledge base to delete")


class AddKnowledgeBaseSourcesInput(ToolInput):
    knowledge_base_id: str = Field(alias="knowledgeBaseId", description="The ID of the knowledge base")
    sources: list[KnowledgeBaseSource] = Field(
        min_length=1, description="Array of sources to add to the knowledge base",
    )


class DeleteKnowledgeBaseSourceInput(ToolInput):
    knowledge_base_id: str = Field(alias="knowledgeBaseId", description="The ID of the knowledge base")
    source_id: str = Field(alias="sourceId", description="The ID of the source to delete")


class KnowledgeBaseSourceRecord(OutputRecord):
    source_id: str
    type: str | None = None
    status: str | None = None


class KnowledgeBaseOutput(OutputRecord):
    knowledge_base_id: str
    knowledge_base_name: str | None = None
    status: str | None = None
    knowledge_base_sources: list[KnowledgeBaseSourceRecord] | None = None
    enable_auto_refresh: bool | None = None
    last_refreshed_timestamp: int | None = None
