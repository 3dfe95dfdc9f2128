"""Async Retell REST API client using httpx."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import quote

import httpx

from retell_mcp.client.config import Settings
from retell_mcp.errors import LogicError, NotFound, RemoteFailure, RemoteNotFound

logger = logging.getLogger("retell_mcp.client")

# Multipart form parts as accepted by httpx ``files=``: (field, (filename, content)).
FormParts = list[tuple[str, tuple[str | None, Any]]]


def path_segment(value: Any) -> str:
    """URL-quote one identifier for substitution into a path (``/`` included)."""
    return quote(str(value), safe="")


class RetellClient:
    """Thin async wrapper around the Retell REST API.

    ``request`` is the generic verb + path primitive; the per-resource methods
    below are the typed surface built on top of it.  Every failure is raised
    as a ``RemoteFailure`` (``RemoteNotFound`` for 404), never returned.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.base_url,
            headers=settings.headers,
            timeout=httpx.Timeout(settings.timeout, connect=10.0),
        )

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Generic primitive
    # ------------------------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        files: FormParts | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        An empty 2xx body (typical for deletes) is reported as ``{"success": True}``.
        """
        try:
            r = await self._client.request(method, path, json=json, params=params or None, files=files)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            detail = _error_detail(e.response)
            logger.error("%s %s -> %s", method, path, status)
            if status == 404:
                raise RemoteNotFound(
                    f"{method} {path} -> HTTP 404: {detail}", method=method, path=path, detail=detail,
                ) from e
            raise RemoteFailure(
                f"{method} {path} -> HTTP {status}: {detail}",
                method=method,
                path=path,
                status_code=status,
                detail=detail,
            ) from e
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise RemoteFailure(f"{method} {path} failed: {e}", method=method, path=path) from e

        if not r.text.strip():
            return {"success": True}
        try:
            return r.json()
        except ValueError as e:
            raise RemoteFailure(
                f"{method} {path} returned a non-JSON body",
                method=method,
                path=path,
                status_code=r.status_code,
                detail=r.text[:500],
            ) from e

    # ==================================================================
    # CALLS
    # ==================================================================

    async def create_phone_call(self, payload: dict[str, Any]) -> Any:
        return await self.request("POST", "/v2/create-phone-call", json=payload)

    async def create_web_call(self, payload: dict[str, Any]) -> Any:
        return await self.request("POST", "/v2/create-web-call", json=payload)

    async def get_call(self, call_id: str) -> Any:
        return await self.request("GET", f"/v2/get-call/{path_segment(call_id)}")

    async def list_calls(self, payload: dict[str, Any]) -> Any:
        filter_criteria: dict[str, Any] = {}
        if "agent_id" in payload:
            filter_criteria["agent_id"] = [payload["agent_id"]]
        window: dict[str, int] = {}
        if "start_timestamp" in payload:
            window["lower_threshold"] = payload["start_timestamp"]
        if "end_timestamp" in payload:
            window["upper_threshold"] = payload["end_timestamp"]
        if window:
            filter_criteria["start_timestamp"] = window

        body: dict[str, Any] = {}
        if filter_criteria:
            body["filter_criteria"] = filter_criteria
        for key in ("sort_order", "limit", "pagination_key"):
            if key in payload:
                body[key] = payload[key]
        return await self.request("POST", "/v2/list-calls", json=body)

    async def update_call(self, call_id: str, payload: dict[str, Any]) -> Any:
        return await self.request("PATCH", f"/v2/update-call/{path_segment(call_id)}", json=payload)

    async def delete_call(self, call_id: str) -> Any:
        return await self.request("DELETE", f"/v2/delete-call/{path_segment(call_id)}")

    # ==================================================================
    # AGENTS
    # ==================================================================

    async def list_agents(self) -> Any:
        return await self.request("GET", "/list-agents")

    async def create_agent(self, payload: dict[str, Any]) -> Any:
        return await self.request("POST", "/create-agent", json=payload)

    async def get_agent(self, agent_id: str) -> Any:
        return await self.request("GET", f"/get-agent/{path_segment(agent_id)}")

    async def update_agent(self, agent_id: str, payload: dict[str, Any]) -> Any:
        return await self.request("PATCH", f"/update-agent/{path_segment(agent_id)}", json=payload)

    async def delete_agent(self, agent_id: str) -> Any:
        return await self.request("DELETE", f"/delete-agent/{path_segment(agent_id)}")

    # ==================================================================
    # PHONE NUMBERS
    # ==================================================================

    async def list_phone_numbers(self) -> Any:
        return await self.request("GET", "/list-phone-numbers")

    async def create_phone_number(self, payload: dict[str, Any]) -> Any:
        return await self.request("POST", "/create-phone-number", json=payload)

    async def get_phone_number(self, phone_number: str) -> Any:
        return await self.request("GET", f"/get-phone-number/{path_segment(phone_number)}")

    async def update_phone_number(self, phone_number: str, payload: dict[str, Any]) -> Any:
        return await self.request(
            "PATCH", f"/update-phone-number/{path_segment(phone_number)}", json=payload,
        )

    async def delete_phone_number(self, phone_number: str) -> Any:
        return await self.request("DELETE", f"/delete-phone-number/{path_segment(phone_number)}")

    # ==================================================================
    # VOICES
    # ==================================================================

    async def list_voices(self) -> Any:
        return await self.request("GET", "/list-voices")

    async def get_voice(self, voice_id: str) -> Any:
        return await self.request("GET", f"/get-voice/{path_segment(voice_id)}")

    # ==================================================================
    # KNOWLEDGE BASES (multipart uploads)
    # ==================================================================

    async def list_knowledge_bases(self) -> Any:
        return await self.request("GET", "/list-knowledge-bases")

    async def create_knowledge_base(self, payload: dict[str, Any]) -> Any:
        parts: FormParts = [("knowledge_base_name", (None, payload["knowledge_base_name"]))]
        texts = payload.get("knowledge_base_texts")
        if texts:
            parts.append(("knowledge_base_texts", (None, json.dumps(texts))))
        for url in payload.get("knowledge_base_urls", []):
            parts.append(("knowledge_base_urls", (None, url)))
        if "enable_auto_refresh" in payload:
            parts.append(("enable_auto_refresh", (None, "true" if payload["enable_auto_refresh"] else "false")))
        return await self.request("POST", "/create-knowledge-base", files=parts)

    async def get_knowledge_base(self, knowledge_base_id: str) -> Any:
        kb = await self.request("GET", f"/get-knowledge-base/{path_segment(knowledge_base_id)}")
        if not kb:
            raise NotFound(f"Knowledge base with ID {knowledge_base_id} not found")
        return kb

    async def delete_knowledge_base(self, knowledge_base_id: str) -> Any:
        return await self.request("DELETE", f"/delete-knowledge-base/{path_segment(knowledge_base_id)}")

    async def add_knowledge_base_sources(self, knowledge_base_id: str, payload: dict[str, Any]) -> Any:
        """Upload url / text / file sources in one multipart request.

        File sources are read from the local filesystem of this process.
        """
        parts: FormParts = []
        texts: list[dict[str, str]] = []
        for index, source in enumerate(payload["sources"]):
            kind = source["type"]
            if kind == "url":
                parts.append(("knowledge_base_urls", (None, source["url"])))
            elif kind == "text":
                texts.append({"title": source.get("title") or f"text-{index}", "text": source["content"]})
            else:
                parts.append(("knowledge_base_files", _read_upload(source["file_path"])))
        if texts:
            parts.append(("knowledge_base_texts", (None, json.dumps(texts))))
        return await self.request(
            "POST", f"/add-knowledge-base-sources/{path_segment(knowledge_base_id)}", files=parts,
        )

    # ==================================================================
    # RETELL LLM RESPONSE ENGINES
    # ==================================================================

    async def list_retell_llms(self) -> Any:
        return await self.request("GET", "/list-retell-llms")

    async def create_retell_llm(self, payload: dict[str, Any]) -> Any:
        return await self.request("POST", "/create-retell-llm", json=payload)

    async def get_retell_llm(self, llm_id: str) -> Any:
        return await self.request("GET", f"/get-retell-llm/{path_segment(llm_id)}")

    async def update_retell_llm(self, llm_id: str, payload: dict[str, Any]) -> Any:
        return await self.request("PATCH", f"/update-retell-llm/{path_segment(llm_id)}", json=payload)

    async def delete_retell_llm(self, llm_id: str) -> Any:
        return await self.request("DELETE", f"/delete-retell-llm/{path_segment(llm_id)}")

    # ==================================================================
    # CONCURRENCY
    # ==================================================================

    async def get_concurrency(self) -> Any:
        return await self.request("GET", "/get-concurrency")


def _error_detail(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _read_upload(file_path: str) -> tuple[str, bytes]:
    path = Path(file_path).expanduser()
    if not path.is_file():
        raise LogicError(f"Knowledge base file source not found: {file_path}")
    return path.name, path.read_bytes()
