"""RetellClient and Settings.

Covers environment loading, the generic request primitive (success, empty
bodies, error mapping) and the typed per-resource methods.
"""

from __future__ import annotations

import json
import os
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from retell_mcp.client import RetellClient, Settings
from retell_mcp.errors import LogicError, NotFound, RemoteFailure, RemoteNotFound


def _response(status: int, method: str = "GET", path: str = "/x", **kwargs) -> httpx.Response:
    return httpx.Response(
        status_code=status,
        request=httpx.Request(method, f"https://api.retellai.com{path}"),
        **kwargs,
    )


def _client_returning(response: httpx.Response) -> RetellClient:
    client = RetellClient(Settings(api_key="k"))
    client._client.request = AsyncMock(return_value=response)
    return client


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettings:
    """Settings.from_env reads env vars correctly with defaults."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            s = Settings.from_env()
            assert s.api_key == ""
            assert s.api_endpoint == "https://api.retellai.com"
            assert s.timeout == 60
            assert s.log_level == "WARNING"

    def test_env_override(self):
        env = {
            "RETELL_API_KEY": "key_123",
            "RETELL_API_ENDPOINT": "https://retell.example.com/",
            "RETELL_TIMEOUT": "15",
            "RETELL_MCP_LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env, clear=True):
            s = Settings.from_env()
            assert s.api_key == "key_123"
            # Trailing slash stripped
            assert s.api_endpoint == "https://retell.example.com"
            assert s.timeout == 15
            assert s.log_level == "DEBUG"

    def test_headers_with_key(self):
        h = Settings(api_key="my-key").headers
        assert h["Authorization"] == "Bearer my-key"
        assert "Content-Type" not in h

    def test_headers_without_key(self):
        assert "Authorization" not in Settings(api_key="").headers

    def test_key_not_in_repr(self):
        assert "secret" not in repr(Settings(api_key="secret"))

    def test_frozen(self):
        s = Settings(api_key="x")
        with pytest.raises(AttributeError):
            s.api_key = "y"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# RetellClient instantiation
# ---------------------------------------------------------------------------


class TestRetellClientInit:
    """RetellClient wraps httpx.AsyncClient correctly."""

    def test_creates_httpx_client(self):
        client = RetellClient(Settings(api_key="k", timeout=30))
        assert isinstance(client._client, httpx.AsyncClient)
        assert client._client.headers["Authorization"] == "Bearer k"

    def test_base_url_set(self):
        client = RetellClient(Settings(api_key="k", api_endpoint="http://localhost:9000"))
        assert str(client._client.base_url).rstrip("/") == "http://localhost:9000"

    @pytest.mark.asyncio
    async def test_close(self):
        client = RetellClient(Settings(api_key="k"))
        await client.close()
        assert client._client.is_closed


# ---------------------------------------------------------------------------
# Generic request primitive
# ---------------------------------------------------------------------------


class TestRequest:
    """request() decodes JSON and maps every failure to the error taxonomy."""

    @pytest.mark.asyncio
    async def test_json_body_returned(self):
        client = _client_returning(_response(200, json={"agent_id": "a1"}))
        assert await client.request("GET", "/get-agent/a1") == {"agent_id": "a1"}

    @pytest.mark.asyncio
    async def test_empty_body_is_success(self):
        client = _client_returning(_response(204, method="DELETE"))
        assert await client.request("DELETE", "/delete-agent/a1") == {"success": True}

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self):
        client = _client_returning(_response(200, text="<html>oops</html>"))
        with pytest.raises(RemoteFailure) as info:
            await client.request("GET", "/list-agents")
        assert info.value.status_code == 200
        assert "non-JSON" in str(info.value)

    @pytest.mark.asyncio
    async def test_404_is_not_found(self):
        resp = _response(404, path="/get-agent/missing", json={"error_message": "Not Found"})
        client = RetellClient(Settings(api_key=""))
        client._client.request = AsyncMock(side_effect=httpx.HTTPStatusError(
            "404", request=resp.request, response=resp,
        ))

        with pytest.raises(NotFound) as info:
            await client.request("GET", "/get-agent/missing")
        exc = info.value
        assert isinstance(exc, RemoteNotFound)
        assert isinstance(exc, RemoteFailure)
        assert exc.status_code == 404
        assert exc.detail == {"error_message": "Not Found"}
        assert isinstance(exc.__cause__, httpx.HTTPStatusError)

    @pytest.mark.asyncio
    async def test_500_is_remote_failure(self):
        resp = _response(500, method="POST", path="/create-agent", text="Internal Server Error")
        client = RetellClient(Settings(api_key=""))
        client._client.request = AsyncMock(side_effect=httpx.HTTPStatusError(
            "500", request=resp.request, response=resp,
        ))

        with pytest.raises(RemoteFailure) as info:
            await client.request("POST", "/create-agent", json={})
        exc = info.value
        assert not isinstance(exc, NotFound)
        assert exc.status_code == 500
        assert exc.method == "POST"
        assert exc.path == "/create-agent"
        assert exc.detail == "Internal Server Error"
        assert "HTTP 500" in str(exc)

    @pytest.mark.asyncio
    async def test_connection_error(self):
        client = RetellClient(Settings(api_key=""))
        client._client.request = AsyncMock(side_effect=httpx.ConnectError("Connection refused"))

        with pytest.raises(RemoteFailure) as info:
            await client.request("GET", "/list-agents")
        assert info.value.status_code is None
        assert isinstance(info.value.__cause__, httpx.ConnectError)


# ---------------------------------------------------------------------------
# Typed methods (mocked transport)
# ---------------------------------------------------------------------------


class TestTypedMethods:
    """Verify typed methods hit the right verb and path."""

    @pytest.mark.asyncio
    async def test_get_call_uses_v2(self):
        client = _client_returning(_response(200, json={"call_id": "c1"}))
        await client.get_call("c1")
        client._client.request.assert_called_once_with(
            "GET", "/v2/get-call/c1", json=None, params=None, files=None,
        )

    @pytest.mark.asyncio
    async def test_ids_are_quoted(self):
        client = _client_returning(_response(200, json={"phone_number": "+14155550100"}))
        await client.get_phone_number("+1 415/555")
        args = client._client.request.call_args.args
        assert args == ("GET", "/get-phone-number/%2B1%20415%2F555")

    @pytest.mark.asyncio
    async def test_update_agent(self):
        client = _client_returning(_response(200, json={"agent_id": "a1"}))
        await client.update_agent("a1", {"agent_name": "Front desk"})
        client._client.request.assert_called_once_with(
            "PATCH", "/update-agent/a1", json={"agent_name": "Front desk"}, params=None, files=None,
        )

    @pytest.mark.asyncio
    async def test_list_calls_builds_filter_criteria(self):
        client = _client_returning(_response(200, json=[]))
        await client.list_calls({
            "agent_id": "a1",
            "start_timestamp": 1000,
            "end_timestamp": 2000,
            "limit": 10,
            "sort_order": "descending",
        })
        body = client._client.request.call_args.kwargs["json"]
        assert body == {
            "filter_criteria": {
                "agent_id": ["a1"],
                "start_timestamp": {"lower_threshold": 1000, "upper_threshold": 2000},
            },
            "sort_order": "descending",
            "limit": 10,
        }
        assert client._client.request.call_args.args == ("POST", "/v2/list-calls")

    @pytest.mark.asyncio
    async def test_list_calls_without_filters(self):
        client = _client_returning(_response(200, json=[]))
        await client.list_calls({})
        assert client._client.request.call_args.kwargs["json"] == {}

    @pytest.mark.asyncio
    async def test_get_concurrency(self):
        client = _client_returning(_response(200, json={"current_concurrency": 2, "concurrency_limit": 20}))
        result = await client.get_concurrency()
        assert result["concurrency_limit"] == 20
        assert client._client.request.call_args.args == ("GET", "/get-concurrency")


# ---------------------------------------------------------------------------
# Knowledge bases (multipart)
# ---------------------------------------------------------------------------


class TestKnowledgeBases:
    """Knowledge base writes are sent as multipart form data."""

    @pytest.mark.asyncio
    async def test_create_knowledge_base_form(self):
        client = _client_returning(_response(201, method="POST", json={"knowledge_base_id": "kb1"}))
        await client.create_knowledge_base({
            "knowledge_base_name": "FAQ",
            "knowledge_base_texts": [{"title": "Hours", "text": "9 to 5"}],
            "knowledge_base_urls": ["https://a.example", "https://b.example"],
            "enable_auto_refresh": False,
        })
        call = client._client.request.call_args
        assert call.args == ("POST", "/create-knowledge-base")
        assert call.kwargs["json"] is None
        parts = call.kwargs["files"]
        assert ("knowledge_base_name", (None, "FAQ")) in parts
        assert [p for p in parts if p[0] == "knowledge_base_urls"] == [
            ("knowledge_base_urls", (None, "https://a.example")),
            ("knowledge_base_urls", (None, "https://b.example")),
        ]
        texts = dict(parts)["knowledge_base_texts"][1]
        assert json.loads(texts) == [{"title": "Hours", "text": "9 to 5"}]
        assert ("enable_auto_refresh", (None, "false")) in parts

    @pytest.mark.asyncio
    async def test_add_sources_mixed(self, tmp_path):
        doc = tmp_path / "menu.pdf"
        doc.write_bytes(b"%PDF-1.4")
        client = _client_returning(_response(200, method="POST", json={"knowledge_base_id": "kb1"}))

        await client.add_knowledge_base_sources("kb1", {"sources": [
            {"type": "url", "url": "https://a.example"},
            {"type": "text", "content": "Open daily"},
            {"type": "file", "file_path": str(doc)},
        ]})

        call = client._client.request.call_args
        assert call.args == ("POST", "/add-knowledge-base-sources/kb1")
        parts = call.kwargs["files"]
        assert ("knowledge_base_urls", (None, "https://a.example")) in parts
        assert ("knowledge_base_files", ("menu.pdf", b"%PDF-1.4")) in parts
        texts = json.loads(dict(parts)["knowledge_base_texts"][1])
        assert texts == [{"title": "text-1", "text": "Open daily"}]

    @pytest.mark.asyncio
    async def test_add_missing_file_fails_before_request(self, tmp_path):
        client = _client_returning(_response(200, json={}))
        with pytest.raises(LogicError):
            await client.add_knowledge_base_sources("kb1", {"sources": [
                {"type": "file", "file_path": str(tmp_path / "nope.txt")},
            ]})
        client._client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_knowledge_base_empty_is_not_found(self):
        client = _client_returning(_response(200, json={}))
        with pytest.raises(NotFound):
            await client.get_knowledge_base("kb1")
