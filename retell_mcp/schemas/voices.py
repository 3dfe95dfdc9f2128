"""Voice contracts (read-only)."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from retell_mcp.schemas.base import OutputRecord, ToolInput


class GetVoiceInput(ToolInput):
    voice_id: str = Field(alias="voiceId", description="The ID of the voice to retrieve")


class VoiceOutput(OutputRecord):
    voice_id: str
    voice_name: str
    provider: str
    accent: str | None = None
    gender: Literal["male", "female"] | None = None
    age: str | None = None
    preview_audio_url: str | None = None
