"""API gateway: how a validated request reaches the Retell API.

Every handler in the catalog is an ``Endpoint``: it splits the request into
{path ids, query, body} and sends it.  Two interchangeable strategies exist:

  TypedCall    call a first-class ``RetellClient`` method
               (calls, agents, phone numbers, voices, KBs, LLMs, concurrency)
  GenericCall  substitute ids into a verb + path template and use the generic
               ``RetellClient.request`` primitive
               (flows, shared components, batch tests, test cases, KB sources)

Both return the raw remote response and let every failure propagate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from string import Formatter
from typing import Any

from retell_mcp.client import RetellClient
from retell_mcp.client.retell_client import path_segment
from retell_mcp.schemas.base import ToolInput

_BODY_VERBS: frozenset[str] = frozenset({"POST", "PATCH", "PUT"})


class Endpoint(ABC):
    """A handler that turns one validated request into one remote call."""

    path_params: tuple[str, ...] = ()
    query_params: tuple[str, ...] = ()

    def split(self, request: ToolInput) -> tuple[dict[str, Any], dict[str, Any], dict[str, Any]]:
        """Partition the request payload into (path ids, query params, body)."""
        body = request.payload()
        ids = {name: body.pop(name) for name in self.path_params}
        query = {name: body.pop(name) for name in self.query_params if name in body}
        return ids, query, body

    @abstractmethod
    async def execute(self, client: RetellClient, request: ToolInput) -> Any:
        ...

    @abstractmethod
    def describe(self) -> str:
        ...


@dataclass(frozen=True)
class TypedCall(Endpoint):
    """Invoke ``client.<method>(*ids[, body])``."""

    method: str
    path_params: tuple[str, ...] = ()
    sends_body: bool = False

    async def execute(self, client: RetellClient, request: ToolInput) -> Any:
        ids, _query, body = self.split(request)
        args: list[Any] = [ids[name] for name in self.path_params]
        if self.sends_body:
            args.append(body)
        return await getattr(client, self.method)(*args)

    def describe(self) -> str:
        return f"RetellClient.{self.method}"


@dataclass(frozen=True)
class GenericCall(Endpoint):
    """Send ``verb`` to ``template`` with ids substituted, e.g. ``/get-test-case/{test_case_id}``."""

    verb: str
    template: str
    query_params: tuple[str, ...] = ()

    @property
    def path_params(self) -> tuple[str, ...]:  # type: ignore[override]
        return tuple(name for _text, name, _spec, _conv in Formatter().parse(self.template) if name)

    @property
    def sends_body(self) -> bool:
        return self.verb in _BODY_VERBS

    def path(self, ids: dict[str, Any]) -> str:
        return self.template.format(**{name: path_segment(value) for name, value in ids.items()})

    async def send(
        self,
        client: RetellClient,
        ids: dict[str, Any],
        *,
        query: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        return await client.request(
            self.verb,
            self.path(ids),
            json=(body or {}) if self.sends_body else None,
            params=query or None,
        )

    async def execute(self, client: RetellClient, request: ToolInput) -> Any:
        ids, query, body = self.split(request)
        return await self.send(client, ids, query=query, body=body)

    def describe(self) -> str:
        return f"{self.verb} {self.template}"
