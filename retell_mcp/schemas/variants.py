"""Tagged-variant shapes embedded in agent, LLM, batch-test and knowledge-base contracts.

Each union is discriminated on ``type``; every member forbids the fields of
its siblings, so e.g. a ``predefined`` transfer destination carrying
``prompt`` is rejected rather than silently accepted.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field

from retell_mcp.schemas.base import Variant

# ---------------------------------------------------------------------------
# Transfer destinations
# ---------------------------------------------------------------------------


class PredefinedDestination(Variant):
    type: Literal["predefined"]
    value: Literal["voicemail", "operator"]
    number: str


class InferredDestination(Variant):
    type: Literal["inferred"]
    description: str
    prompt: str


TransferDestination = Annotated[
    Union[PredefinedDestination, InferredDestination],
    Field(discriminator="type"),
]

# ---------------------------------------------------------------------------
# Tool definitions (general_tools / state tools)
# ---------------------------------------------------------------------------


class EndCallTool(Variant):
    type: Literal["end_call"]
    name: str
    description: str


class TransferCallTool(Variant):
    type: Literal["transfer_call"]
    name: str
    description: str
    transfer_destination: TransferDestination


class CheckAvailabilityCalTool(Variant):
    type: Literal["check_availability_cal"]
    name: str
    description: str
    calendar_url: str
    cal_api_key: str
    event_type_id: int


class BookAppointmentCalTool(Variant):
    type: Literal["book_appointment_cal"]
    name: str
    description: str
    calendar_url: str
    cal_api_key: str
    event_type_id: int


class PressDigitTool(Variant):
    type: Literal["press_digit"]
    name: str
    description: str
    digit: str


class CustomTool(Variant):
    type: Literal["custom"]
    name: str
    description: str
    speak_after_execution: bool
    speak_during_execution: bool
    url: str


ToolDefinition = Annotated[
    Union[
        EndCallTool,
        TransferCallTool,
        CheckAvailabilityCalTool,
        BookAppointmentCalTool,
        PressDigitTool,
        CustomTool,
    ],
    Field(discriminator="type"),
]

# ---------------------------------------------------------------------------
# Response engines
# ---------------------------------------------------------------------------


class RetellLLMEngine(Variant):
    type: Literal["retell-llm"]
    llm_id: str = Field(
        description="ID of the Retell LLM response engine; if the user did not name one, create it first",
    )
    version: int | None = Field(default=None, ge=0, description="Pin to a specific LLM version")


class ConversationFlowEngine(Variant):
    type: Literal["conversation-flow"]
    conversation_flow_id: str
    version: int | None = Field(default=None, ge=0, description="Pin to a specific flow version")


ResponseEngine = Annotated[
    Union[RetellLLMEngine, ConversationFlowEngine],
    Field(discriminator="type"),
]


class RetellLLMEngineUpdate(Variant):
    """Engine binding on agent updates: every field but the tag may be omitted."""

    type: Literal["retell-llm"]
    llm_id: str | None = None
    version: int | None = Field(default=None, ge=0)


class ConversationFlowEngineUpdate(Variant):
    type: Literal["conversation-flow"]
    conversation_flow_id: str | None = None
    version: int | None = Field(default=None, ge=0)


ResponseEngineUpdate = Annotated[
    Union[RetellLLMEngineUpdate, ConversationFlowEngineUpdate],
    Field(discriminator="type"),
]

# ---------------------------------------------------------------------------
# Post-call analysis fields
# ---------------------------------------------------------------------------


class StringAnalysisData(Variant):
    type: Literal["string"]
    name: str
    description: str
    examples: list[str]


class EnumAnalysisData(Variant):
    type: Literal["enum"]
    name: str
    description: str
    examples: list[str]
    choices: list[str]


class BooleanAnalysisData(Variant):
    type: Literal["boolean"]
    name: str
    description: str
    examples: list[str]


class NumberAnalysisData(Variant):
    type: Literal["number"]
    name: str
    description: str
    examples: list[str]


AnalysisData = Annotated[
    Union[StringAnalysisData, EnumAnalysisData, BooleanAnalysisData, NumberAnalysisData],
    Field(discriminator="type"),
]

# ---------------------------------------------------------------------------
# Knowledge base sources
# ---------------------------------------------------------------------------


class UrlSource(Variant):
    type: Literal["url"]
    url: str = Field(description="Web page to crawl into the knowledge base")


class TextSource(Variant):
    type: Literal["text"]
    content: str = Field(description="Text content to add")
    title: str | None = Field(default=None, description="Title shown for the text source")


class FileSource(Variant):
    type: Literal["file"]
    file_path: str = Field(description="Path of a local file readable by this server")


KnowledgeBaseSource = Annotated[
    Union[UrlSource, TextSource, FileSource],
    Field(discriminator="type"),
]

# ---------------------------------------------------------------------------
# LLM state graph
# ---------------------------------------------------------------------------


class EdgeParameters(Variant):
    type: Literal["object"]
    properties: dict[str, Any]
    required: list[str]


class StateEdge(Variant):
    destination_state_name: str
    description: str
    parameters: EdgeParameters | None = None


class LLMState(Variant):
    name: str
    state_prompt: str
    edges: list[StateEdge] | None = None
    tools: list[ToolDefinition] | None = None
