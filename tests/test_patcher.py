"""Single-node instruction patch on conversation flows."""

from __future__ import annotations

import copy
from unittest.mock import AsyncMock, MagicMock

import pytest

from retell_mcp.client import RetellClient
from retell_mcp.errors import LogicError, NotFound, RemoteFailure, RemoteNotFound
from retell_mcp.mcp.patcher import NodeInstructionPatch, replace_node_instruction
from retell_mcp.schemas.conversation_flows import UpdateConversationFlowNodePromptInput


def _request(node_id: str = "b", instruction: str = "z") -> UpdateConversationFlowNodePromptInput:
    return UpdateConversationFlowNodePromptInput.model_validate(
        {"conversationFlowId": "flow_1", "nodeId": node_id, "instruction": instruction},
    )


def _client(flow) -> MagicMock:
    client = MagicMock(spec=RetellClient)

    async def request(method, path, *, json=None, params=None):
        if method == "GET":
            return copy.deepcopy(flow)
        return {"conversation_flow_id": "flow_1", "nodes": json["nodes"]}

    client.request = AsyncMock(side_effect=request)
    return client


# ---------------------------------------------------------------------------
# replace_node_instruction
# ---------------------------------------------------------------------------


class TestReplaceNodeInstruction:
    def test_only_target_changes(self):
        nodes = [{"id": "a", "instruction": "x"}, {"id": "b", "instruction": "y"}]
        assert replace_node_instruction(nodes, "b", "z") == [
            {"id": "a", "instruction": "x"},
            {"id": "b", "instruction": "z"},
        ]

    def test_input_not_mutated(self):
        nodes = [{"id": "a", "instruction": "x"}]
        replace_node_instruction(nodes, "a", "new")
        assert nodes == [{"id": "a", "instruction": "x"}]

    def test_other_fields_and_order_preserved(self):
        nodes = [
            {"id": "end", "type": "end"},
            {"id": "greet", "type": "conversation", "instruction": {"type": "prompt", "text": "Hi"},
             "edges": [{"id": "e1", "destination_node_id": "end"}]},
        ]
        instruction = {"type": "prompt", "text": "Hello there"}
        patched = replace_node_instruction(nodes, "greet", instruction)
        assert patched[0] is nodes[0]
        assert list(patched[1]) == ["id", "type", "instruction", "edges"]
        assert patched[1]["instruction"] == instruction
        assert patched[1]["edges"] == nodes[1]["edges"]

    def test_node_without_instruction_gains_one(self):
        assert replace_node_instruction([{"id": "a"}], "a", "x") == [{"id": "a", "instruction": "x"}]

    def test_first_match_wins(self):
        nodes = [{"id": "a", "instruction": "1"}, {"id": "a", "instruction": "2"}]
        assert replace_node_instruction(nodes, "a", "z") == [
            {"id": "a", "instruction": "z"},
            {"id": "a", "instruction": "2"},
        ]

    @pytest.mark.parametrize("nodes", [[], None, {"id": "a"}])
    @pytest.mark.parametrize("node_id", ["a", "anything"])
    def test_empty_or_absent_is_logic_error(self, nodes, node_id):
        with pytest.raises(LogicError) as info:
            replace_node_instruction(nodes, node_id, "z")
        assert node_id in str(info.value)

    def test_unknown_node_lists_every_id(self):
        nodes = [{"id": "a"}, {"id": "b"}, {"id": "c"}]
        with pytest.raises(NotFound) as info:
            replace_node_instruction(nodes, "q", "z")
        assert info.value.known_ids == ["a", "b", "c"]
        assert "Available node IDs: a, b, c" in str(info.value)

    def test_malformed_nodes_skipped(self):
        nodes = ["junk", {"type": "end"}, {"id": "a"}]
        with pytest.raises(NotFound) as info:
            replace_node_instruction(nodes, "q", "z")
        assert info.value.known_ids == ["a"]


# ---------------------------------------------------------------------------
# NodeInstructionPatch (fetch -> locate -> submit)
# ---------------------------------------------------------------------------


class TestNodeInstructionPatch:
    @pytest.mark.asyncio
    async def test_submits_full_node_list(self):
        flow = {
            "conversation_flow_id": "flow_1",
            "global_prompt": "Be nice",
            "nodes": [{"id": "a", "instruction": "x"}, {"id": "b", "instruction": "y"}],
        }
        client = _client(flow)

        result = await NodeInstructionPatch().execute(client, _request())

        assert client.request.await_count == 2
        get_call, patch_call = client.request.await_args_list
        assert get_call.args == ("GET", "/get-conversation-flow/flow_1")
        assert patch_call.args == ("PATCH", "/update-conversation-flow/flow_1")
        assert patch_call.kwargs["json"] == {
            "nodes": [{"id": "a", "instruction": "x"}, {"id": "b", "instruction": "z"}],
        }
        assert result["nodes"][1] == {"id": "b", "instruction": "z"}

    @pytest.mark.asyncio
    async def test_empty_flow_never_submits(self):
        client = _client({"conversation_flow_id": "flow_1", "nodes": []})
        with pytest.raises(LogicError):
            await NodeInstructionPatch().execute(client, _request())
        assert client.request.await_count == 1

    @pytest.mark.asyncio
    async def test_flow_without_nodes_key(self):
        client = _client({"conversation_flow_id": "flow_1"})
        with pytest.raises(LogicError):
            await NodeInstructionPatch().execute(client, _request())

    @pytest.mark.asyncio
    async def test_unknown_node_never_submits(self):
        client = _client({"nodes": [{"id": "a"}, {"id": "b"}]})
        with pytest.raises(NotFound) as info:
            await NodeInstructionPatch().execute(client, _request(node_id="zz"))
        assert "a, b" in str(info.value)
        assert client.request.await_count == 1

    @pytest.mark.asyncio
    async def test_fetch_404_propagates(self, caplog):
        client = MagicMock(spec=RetellClient)
        client.request = AsyncMock(side_effect=RemoteNotFound(
            "GET /get-conversation-flow/flow_1 -> HTTP 404", method="GET", path="/get-conversation-flow/flow_1",
        ))
        with caplog.at_level("ERROR", logger="retell_mcp.mcp.patcher"):
            with pytest.raises(NotFound):
                await NodeInstructionPatch().execute(client, _request())
        assert "failed at step 'fetch'" in caplog.text

    @pytest.mark.asyncio
    async def test_submit_failure_reports_step(self, caplog):
        client = MagicMock(spec=RetellClient)
        client.request = AsyncMock(side_effect=[
            {"nodes": [{"id": "b", "instruction": "y"}]},
            RemoteFailure("PATCH -> HTTP 500", method="PATCH", path="/update-conversation-flow/flow_1",
                          status_code=500),
        ])
        with caplog.at_level("ERROR", logger="retell_mcp.mcp.patcher"):
            with pytest.raises(RemoteFailure):
                await NodeInstructionPatch().execute(client, _request())
        assert "failed at step 'submit'" in caplog.text

    def test_describe_names_both_routes(self):
        text = NodeInstructionPatch().describe()
        assert "GET /get-conversation-flow/{conversation_flow_id}" in text
        assert "PATCH /update-conversation-flow/{conversation_flow_id}" in text
