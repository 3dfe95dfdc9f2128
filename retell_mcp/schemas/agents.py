"""Agent contracts.

Agents carry a large, fast-moving set of voice/behavior settings. The known
ones are declared (and type-checked) below; anything else is passed through to
the API untouched (``extra="allow"``); only the response-engine binding and
voice are required.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from retell_mcp.schemas.base import OutputRecord, ToolInput
from retell_mcp.schemas.variants import AnalysisData, ResponseEngine, ResponseEngineUpdate

VoiceModel = Literal[
    "eleven_turbo_v2",
    "eleven_flash_v2",
    "eleven_turbo_v2_5",
    "eleven_flash_v2_5",
    "eleven_multilingual_v2",
    "Play3.0-mini",
    "PlayDialog",
]

Language = Literal[
    "en-US", "en-IN", "en-GB", "en-AU", "en-NZ", "de-DE", "es-ES", "es-419", "hi-IN",
    "fr-FR", "fr-CA", "ja-JP", "pt-PT", "pt-BR", "zh-CN", "ru-RU", "it-IT", "ko-KR",
]


class PronunciationEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    word: str
    alphabet: Literal["ipa", "cmu"]
    phoneme: str


class AgentSettings(ToolInput):
    model_config = ConfigDict(extra="allow")

    agent_name: str | None = Field(default=None, description="Name of the agent")
    fallback_voice_ids: list[str] | None = None
    voice_temperature: float | None = Field(default=None, ge=0, le=2)
    voice_speed: float | None = Field(default=None, ge=0.5, le=2)
    volume: float | None = Field(default=None, ge=0, le=2)
    responsiveness: float | None = Field(default=None, ge=0, le=1)
    interruption_sensitivity: float | None = Field(default=None, ge=0, le=1)
    enable_backchannel: bool | None = None
    backchannel_frequency: float | None = Field(default=None, ge=0, le=1)
    backchannel_words: list[str] | None = None
    reminder_trigger_ms: int | None = None
    reminder_max_count: int | None = None
    ambient_sound: str | None = None
    ambient_sound_volume: float | None = None
    webhook_url: str | None = None
    boosted_keywords: list[str] | None = None
    enable_transcription_formatting: bool | None = None
    opt_out_sensitive_data_storage: bool | None = None
    opt_in_signed_url: bool | None = None
    pronunciation_dictionary: list[PronunciationEntry] | None = None
    normalize_for_speech: bool | None = None
    end_call_after_silence_ms: int | None = None
    max_call_duration_ms: int | None = None
    enable_voicemail_detection: bool | None = None
    voicemail_message: str | None = None
    voicemail_detection_timeout_ms: int | None = None
    post_call_analysis_data: list[AnalysisData] | None = None
    post_call_analysis_model: Literal["gpt-4o-mini", "gpt-4o"] | None = None
    begin_message_delay_ms: int | None = None
    ring_duration_ms: int | None = None
    stt_mode: Literal["fast", "accurate"] | None = None


class CreateAgentInput(AgentSettings):
    response_engine: ResponseEngine
    voice_id: str = Field(description="ID of the voice to use")
    voice_model: VoiceModel | None = None
    language: Language | None = None


class GetAgentInput(ToolInput):
    agent_id: str = Field(alias="agentId", description="The ID of the agent to retrieve")


class UpdateAgentInput(AgentSettings):
    agent_id: str = Field(alias="agentId", description="The ID of the agent to update")
    response_engine: ResponseEngineUpdate | None = None
    voice_id: str | None = None
    voice_model: str | None = None
    language: str | None = None


class DeleteAgentInput(ToolInput):
    agent_id: str = Field(alias="agentId", description="The ID of the agent to delete")


class AgentOutput(OutputRecord):
    agent_id: str
    response_engine: dict
    agent_name: str | None = None
    version: int | None = None
    voice_id: str
    voice_model: str | None = None
    language: str | None = None
    webhook_url: str | None = None
    last_modification_timestamp: int
