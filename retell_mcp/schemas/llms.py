"""Retell LLM response-engine contracts."""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field, model_validator

from retell_mcp.schemas.base import OutputRecord, ToolInput
from retell_mcp.schemas.variants import LLMState, ToolDefinition

LLMModel = Literal[
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4.1",
    "gpt-4.1-mini",
    "gpt-4.1-nano",
    "claude-3.7-sonnet",
    "claude-3.5-haiku",
    "gemini-2.0-flash",
    "gemini-2.0-flash-lite",
]

SpeechToSpeechModel = Literal["gpt-4o-realtime", "gpt-4o-mini-realtime"]


class LLMSettings(ToolInput):
    model_config = ConfigDict(extra="forbid", protected_namespaces=())

    version: int | None = Field(default=None, ge=0, description="Version of the Retell LLM")
    model: LLMModel | None = Field(
        default=None, description="Underlying text LLM. Defaults to gpt-4o when neither model is set",
    )
    s2s_model: SpeechToSpeechModel | None = Field(
        default=None, description="Underlying speech-to-speech model. Mutually exclusive with model",
    )
    model_temperature: float | None = Field(
        default=None, ge=0, le=1, description="Randomness of the response, in [0, 1]",
    )
    model_high_priority: bool | None = Field(
        default=None, description="Use the high priority pool with more dedicated resources",
    )
    tool_call_strict_mode: bool | None = Field(
        default=None, description="Structured output for tool calls (gpt-4o / gpt-4o-mini only)",
    )
    general_tools: list[ToolDefinition] | None = Field(
        default=None, description="Tools the model may call in every state",
    )
    states: list[LLMState] | None = Field(default=None, description="States of the LLM")
    starting_state: str | None = Field(
        default=None, description="Name of the starting state. Required if states is not empty",
    )
    begin_message: str | None = Field(default=None, description="First utterance said by the agent in the call")
    default_dynamic_variables: dict[str, str] | None = Field(
        default=None, description="Default dynamic variables as key-value pairs of strings",
    )
    knowledge_base_ids: list[str] | None = Field(
        default=None, description="Knowledge base ids this engine may retrieve from",
    )

    @model_validator(mode="after")
    def _check_models_and_states(self):
        problems: list[str] = []
        if self.model is not None and self.s2s_model is not None:
            problems.append("model and s2s_model cannot both be set")
        if self.states:
            names = [s.name for s in self.states]
            if self.starting_state is None:
                problems.append("starting_state is required when states is not empty")
            elif self.starting_state not in names:
                problems.append(
                    f"starting_state '{self.starting_state}' is not one of the states: {', '.join(names)}"
                )
        if problems:
            raise ValueError("; ".join(problems))
        return self


class CreateRetellLLMInput(LLMSettings):
    general_prompt: str = Field(description="Prompt for the agent to follow")


class GetRetellLLMInput(ToolInput):
    llm_id: str = Field(alias="llmId", description="The ID of the Retell LLM to retrieve")


class UpdateRetellLLMInput(LLMSettings):
    llm_id: str = Field(alias="llmId", description="The ID of the Retell LLM to update")
    general_prompt: str | None = None


class DeleteRetellLLMInput(ToolInput):
    llm_id: str = Field(alias="llmId", description="The ID of the Retell LLM to delete")


class RetellLLMOutput(OutputRecord):
    model_config = ConfigDict(extra="allow", protected_namespaces=())

    llm_id: str
    version: int | None = None
    model: str | None = None
    s2s_model: str | None = None
    model_temperature: float | None = None
    general_prompt: str | None = None
    general_tools: list[dict] | None = None
    states: list[dict] | None = None
    starting_state: str | None = None
    begin_message: str | None = None
    default_dynamic_variables: dict[str, str] | None = None
    knowledge_base_ids: list[str] | None = None
    last_modification_timestamp: int
