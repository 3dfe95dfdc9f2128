"""Registry of the 48 Retell MCP tools.

``TOOL_CATALOG`` is the single source of truth for tool metadata (name,
description, argument contract, result contract, side-effect class, handler).
The dispatcher and the MCP server both consume ``OPERATIONS``, the read-only
name → Operation mapping built from it once at import.

Adding a tool: append an entry to ``TOOL_CATALOG`` (plus, for a typed
endpoint, the method on ``RetellClient``).  Nothing else.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import TypeAdapter

from retell_mcp.mcp.gateway import Endpoint, GenericCall, TypedCall
from retell_mcp.mcp.patcher import NodeInstructionPatch
from retell_mcp.schemas import agents, batch_tests, calls, conversation_flows as flows, knowledge_bases as kb
from retell_mcp.schemas import llms, phone_numbers, shared_components as components, voices
from retell_mcp.schemas.base import DeletionOutput, NoArguments, ToolInput
from retell_mcp.schemas.concurrency import ConcurrencyOutput


class Effect(str, Enum):
    """Side-effect class of a tool."""

    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Operation:
    """One registered tool.

    deleted_message: ``str.format`` template over the request's attribute
                     names; required for DELETE tools, whose results are
                     replaced by ``{"success": True, "message": ...}``.
    """

    name: str
    description: str
    input_model: type[ToolInput]
    handler: Endpoint
    effect: Effect
    output: Any = None
    deleted_message: str | None = None

    def __post_init__(self) -> None:
        if self.effect is Effect.DELETE and not self.deleted_message:
            raise ValueError(f"{self.name}: DELETE tools need a deleted_message")

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()

    def output_schema(self) -> dict[str, Any] | None:
        if self.effect is Effect.DELETE:
            return DeletionOutput.model_json_schema()
        if self.output is None:
            return None
        return TypeAdapter(self.output).json_schema()

    @property
    def read_only(self) -> bool:
        return self.effect is Effect.READ

    @property
    def destructive(self) -> bool:
        return self.effect is Effect.DELETE


def _op(
    name: str,
    desc: str,
    model: type[ToolInput],
    handler: Endpoint,
    effect: Effect,
    output: Any = None,
    deleted: str | None = None,
) -> Operation:
    return Operation(
        name=name,
        description=desc,
        input_model=model,
        handler=handler,
        effect=effect,
        output=output,
        deleted_message=deleted,
    )


def _typed(method: str, *path_params: str, body: bool = False) -> TypedCall:
    return TypedCall(method=method, path_params=path_params, sends_body=body)


def _generic(verb: str, template: str, *query_params: str) -> GenericCall:
    return GenericCall(verb=verb, template=template, query_params=query_params)


R, C, U, D = Effect.READ, Effect.CREATE, Effect.UPDATE, Effect.DELETE

_IRREVERSIBLE = " This cannot be undone."

_KB_PRICING = "Pricing: $0.005/min per call + $8/month per KB (10 free/workspace)."
_BATCH_PRICING = "Pricing: $0.005 per dial (20k calls = $100)."
_CONCURRENCY_NOTE = (
    "Default limit: 20 concurrent calls. Concurrency Blast available: up to 3x limit "
    "or 300 calls at $0.1/min."
)
_COMPONENT_WARNING = "WARNING: This updates ALL flows that embed this component!"
_COMPONENT_DELETE_WARNING = "WARNING: This will break all flows that embed this component!"


# ==================================================================
# TOOL_CATALOG: all 48 tools
# ==================================================================

TOOL_CATALOG: tuple[Operation, ...] = (
    # ── CALLS (6) ─────────────────────────────────────────────────
    _op("create_phone_call",
        "Creates an outbound phone call from a Retell number. Billed per call minute.",
        calls.CreatePhoneCallInput, _typed("create_phone_call", body=True), C, calls.CallOutput),
    _op("create_web_call",
        "Creates a web call and returns its access token. Billed per call minute.",
        calls.CreateWebCallInput, _typed("create_web_call", body=True), C, calls.CallOutput),
    _op("get_call", "Retrieves a call by ID, including transcript, analysis and cost",
        calls.GetCallInput, _typed("get_call", "call_id"), R, calls.CallOutput),
    _op("list_calls", "Lists calls, optionally filtered by agent and start-time window, with pagination",
        calls.ListCallsInput, _typed("list_calls", body=True), R, list[calls.CallOutput]),
    _op("update_call", "Updates a call's metadata and dynamic variables",
        calls.UpdateCallInput, _typed("update_call", "call_id", body=True), U, calls.CallOutput),
    _op("delete_call", "Deletes a call and its recording/transcript." + _IRREVERSIBLE,
        calls.DeleteCallInput, _typed("delete_call", "call_id"), D,
        deleted="Call {call_id} deleted successfully"),

    # ── AGENTS (5) ────────────────────────────────────────────────
    _op("list_agents", "Lists all agents",
        NoArguments, _typed("list_agents"), R, list[agents.AgentOutput]),
    _op("create_agent",
        "Creates a voice agent bound to a response engine (Retell LLM or conversation flow) and a voice",
        agents.CreateAgentInput, _typed("create_agent", body=True), C, agents.AgentOutput),
    _op("get_agent", "Retrieves an agent by ID",
        agents.GetAgentInput, _typed("get_agent", "agent_id"), R, agents.AgentOutput),
    _op("update_agent", "Updates an agent's response engine, voice, behavior and analysis settings",
        agents.UpdateAgentInput, _typed("update_agent", "agent_id", body=True), U, agents.AgentOutput),
    _op("delete_agent", "Deletes an agent and all of its versions." + _IRREVERSIBLE,
        agents.DeleteAgentInput, _typed("delete_agent", "agent_id"), D,
        deleted="Agent {agent_id} deleted successfully"),

    # ── PHONE NUMBERS (5) ─────────────────────────────────────────
    _op("list_phone_numbers", "Lists all phone numbers in the workspace",
        NoArguments, _typed("list_phone_numbers"), R, list[phone_numbers.PhoneNumberOutput]),
    _op("create_phone_number",
        "Buys a new phone number in the given area code. Numbers are billed monthly.",
        phone_numbers.CreatePhoneNumberInput, _typed("create_phone_number", body=True), C,
        phone_numbers.PhoneNumberOutput),
    _op("get_phone_number", "Retrieves a phone number's agent bindings, nickname and webhook",
        phone_numbers.GetPhoneNumberInput, _typed("get_phone_number", "phone_number"), R,
        phone_numbers.PhoneNumberOutput),
    _op("update_phone_number", "Updates a phone number's inbound/outbound agents, nickname or webhook",
        phone_numbers.UpdatePhoneNumberInput, _typed("update_phone_number", "phone_number", body=True), U,
        phone_numbers.PhoneNumberOutput),
    _op("delete_phone_number", "Releases a phone number." + _IRREVERSIBLE,
        phone_numbers.DeletePhoneNumberInput, _typed("delete_phone_number", "phone_number"), D,
        deleted="Phone number {phone_number} deleted successfully"),

    # ── VOICES (2) ────────────────────────────────────────────────
    _op("list_voices", "Lists all available voices",
        NoArguments, _typed("list_voices"), R, list[voices.VoiceOutput]),
    _op("get_voice", "Retrieves a voice by ID",
        voices.GetVoiceInput, _typed("get_voice", "voice_id"), R, voices.VoiceOutput),

    # ── KNOWLEDGE BASES (6) ───────────────────────────────────────
    _op("list_knowledge_bases", "Lists all knowledge bases",
        NoArguments, _typed("list_knowledge_bases"), R, list[kb.KnowledgeBaseOutput]),
    _op("create_knowledge_base", "Creates a new knowledge base. " + _KB_PRICING,
        kb.CreateKnowledgeBaseInput, _typed("create_knowledge_base", body=True), C, kb.KnowledgeBaseOutput),
    _op("get_knowledge_base", "Gets a knowledge base by ID",
        kb.GetKnowledgeBaseInput, _typed("get_knowledge_base", "knowledge_base_id"), R, kb.KnowledgeBaseOutput),
    _op("delete_knowledge_base", "Deletes a knowledge base." + _IRREVERSIBLE,
        kb.DeleteKnowledgeBaseInput, _typed("delete_knowledge_base", "knowledge_base_id"), D,
        deleted="Knowledge base {knowledge_base_id} deleted successfully"),
    _op("add_knowledge_base_sources", "Adds sources (URLs, files, text) to a knowledge base",
        kb.AddKnowledgeBaseSourcesInput, _typed("add_knowledge_base_sources", "knowledge_base_id", body=True), U,
        kb.KnowledgeBaseOutput),
    _op("delete_knowledge_base_source", "Deletes a specific source from a knowledge base",
        kb.DeleteKnowledgeBaseSourceInput,
        _generic("DELETE", "/delete-knowledge-base-source/{knowledge_base_id}/{source_id}"), D,
        deleted="Source {source_id} deleted from KB {knowledge_base_id}"),

    # ── RETELL LLM RESPONSE ENGINES (5) ───────────────────────────
    _op("list_retell_llms", "Lists all Retell LLM response engines",
        NoArguments, _typed("list_retell_llms"), R, list[llms.RetellLLMOutput]),
    _op("create_retell_llm",
        "Creates a Retell LLM response engine (model, prompt, tools, states, dynamic variables, KBs)",
        llms.CreateRetellLLMInput, _typed("create_retell_llm", body=True), C, llms.RetellLLMOutput),
    _op("get_retell_llm", "Retrieves a Retell LLM response engine by ID",
        llms.GetRetellLLMInput, _typed("get_retell_llm", "llm_id"), R, llms.RetellLLMOutput),
    _op("update_retell_llm",
        "Updates a Retell LLM response engine. Agents using it pick up the change on their next call.",
        llms.UpdateRetellLLMInput, _typed("update_retell_llm", "llm_id", body=True), U, llms.RetellLLMOutput),
    _op("delete_retell_llm", "Deletes a Retell LLM response engine." + _IRREVERSIBLE,
        llms.DeleteRetellLLMInput, _typed("delete_retell_llm", "llm_id"), D,
        deleted="Retell LLM {llm_id} deleted successfully"),

    # ── CONVERSATION FLOWS (5) ────────────────────────────────────
    _op("list_conversation_flows", "Lists all conversation flows",
        NoArguments, _generic("GET", "/list-conversation-flows"), R, list[flows.ConversationFlowOutput]),
    _op("get_conversation_flow",
        "Retrieves a conversation flow by ID, including all nodes, prompts, and edges",
        flows.GetConversationFlowInput,
        _generic("GET", "/get-conversation-flow/{conversation_flow_id}", "version"), R,
        flows.ConversationFlowOutput),
    _op("update_conversation_flow",
        "Updates an existing conversation flow (nodes, global_prompt, start_node_id, etc.). "
        "Passing nodes replaces the whole node list.",
        flows.UpdateConversationFlowInput,
        _generic("PATCH", "/update-conversation-flow/{conversation_flow_id}"), U, flows.ConversationFlowOutput),
    _op("update_conversation_flow_node_prompt",
        "Updates the instruction/prompt of a single node in a conversation flow. Fetches the flow, "
        "finds the node by ID, replaces its instruction, and saves the full node list. "
        "Not safe to run concurrently on the same flow: the last save wins.",
        flows.UpdateConversationFlowNodePromptInput, NodeInstructionPatch(), U, flows.ConversationFlowOutput),
    _op("delete_conversation_flow", "Deletes a conversation flow." + _IRREVERSIBLE,
        flows.DeleteConversationFlowInput,
        _generic("DELETE", "/delete-conversation-flow/{conversation_flow_id}"), D,
        deleted="Conversation flow {conversation_flow_id} deleted successfully"),

    # ── SHARED COMPONENTS (5) ─────────────────────────────────────
    _op("list_shared_components", "Lists all shared conversation flow components",
        NoArguments, _generic("GET", "/list-shared-components"), R, list[components.SharedComponentOutput]),
    _op("create_shared_component",
        "Creates a new shared component (reusable sub-flow). "
        "Changes to shared components affect ALL flows that embed them.",
        components.CreateSharedComponentInput, _generic("POST", "/create-shared-component"), C,
        components.SharedComponentOutput),
    _op("get_shared_component", "Retrieves a shared component by ID",
        components.GetSharedComponentInput, _generic("GET", "/get-shared-component/{component_id}"), R,
        components.SharedComponentOutput),
    _op("update_shared_component", "Updates an existing shared component. " + _COMPONENT_WARNING,
        components.UpdateSharedComponentInput, _generic("PATCH", "/update-shared-component/{component_id}"), U,
        components.SharedComponentOutput),
    _op("delete_shared_component", "Deletes a shared component. " + _COMPONENT_DELETE_WARNING,
        components.DeleteSharedComponentInput, _generic("DELETE", "/delete-shared-component/{component_id}"), D,
        deleted="Shared component {component_id} deleted successfully"),

    # ── BATCH TESTS (3) ───────────────────────────────────────────
    _op("create_batch_test",
        "Run a batch test with specified test case definitions. " + _BATCH_PRICING,
        batch_tests.CreateBatchTestInput, _generic("POST", "/create-batch-test"), C, batch_tests.BatchTestOutput),
    _op("get_batch_test", "Get batch test results by ID, including pass/fail/error counts",
        batch_tests.GetBatchTestInput, _generic("GET", "/get-batch-test/{batch_test_id}"), R,
        batch_tests.BatchTestOutput),
    _op("list_batch_tests", "List all batch tests",
        NoArguments, _generic("GET", "/list-batch-tests"), R, list[batch_tests.BatchTestOutput]),

    # ── TEST CASES (5) ────────────────────────────────────────────
    _op("create_test_case", "Create a new test case definition for batch testing",
        batch_tests.CreateTestCaseInput, _generic("POST", "/create-test-case"), C, batch_tests.TestCaseOutput),
    _op("get_test_case", "Get a test case by ID",
        batch_tests.GetTestCaseInput, _generic("GET", "/get-test-case/{test_case_id}"), R,
        batch_tests.TestCaseOutput),
    _op("update_test_case", "Update an existing test case",
        batch_tests.UpdateTestCaseInput, _generic("PATCH", "/update-test-case/{test_case_id}"), U,
        batch_tests.TestCaseOutput),
    _op("delete_test_case", "Delete a test case." + _IRREVERSIBLE,
        batch_tests.DeleteTestCaseInput, _generic("DELETE", "/delete-test-case/{test_case_id}"), D,
        deleted="Test case {test_case_id} deleted successfully"),
    _op("list_test_cases", "List all test cases",
        NoArguments, _generic("GET", "/list-test-cases"), R, list[batch_tests.TestCaseOutput]),

    # ── CONCURRENCY (1) ───────────────────────────────────────────
    _op("get_concurrency_status", "Get current concurrency usage and limit. " + _CONCURRENCY_NOTE,
        NoArguments, _typed("get_concurrency"), R, ConcurrencyOutput),
)


def build_registry(catalog: Iterable[Operation]) -> Mapping[str, Operation]:
    """Index *catalog* by name into a read-only mapping; duplicate names are an error."""
    table: dict[str, Operation] = {}
    for operation in catalog:
        if operation.name in table:
            raise ValueError(f"Duplicate tool name: {operation.name}")
        table[operation.name] = operation
    return MappingProxyType(table)


OPERATIONS: Mapping[str, Operation] = build_registry(TOOL_CATALOG)
