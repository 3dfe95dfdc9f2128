"""Failure taxonomy shared by the validator, gateway, patcher and client.

    RetellToolError
      ├── ValidationError   arguments break the tool contract (every field listed)
      ├── NotFound          remote 404 or a local lookup miss (tool name, node id)
      ├── LogicError        a precondition enforced locally (e.g. empty node list)
      └── RemoteFailure     non-2xx response or transport failure
            └── RemoteNotFound  (also a NotFound)

Nothing is swallowed inside the package: each error is logged once by the
normalizer and re-raised to the transport.
"""

from __future__ import annotations

from typing import Any


class RetellToolError(Exception):
    """Base class for every failure raised by a tool invocation."""


class ValidationError(RetellToolError):
    """Raised when tool arguments fail the declared contract.

    errors: one ``{"field", "message", "type"}`` dict per offending field.
    """

    def __init__(self, tool: str, errors: list[dict[str, str]]) -> None:
        self.tool = tool
        self.errors = errors
        details = "; ".join(f"{e['field'] or '<root>'}: {e['message']}" for e in errors)
        super().__init__(f"Invalid arguments for {tool} ({len(errors)} error(s)): {details}")

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]


class NotFound(RetellToolError):
    """A remote resource or a locally looked-up entry does not exist.

    known_ids: the identifiers that *do* exist, when the lookup can list them.
    """

    def __init__(self, message: str, known_ids: list[str] | None = None) -> None:
        super().__init__(message)
        self.known_ids = known_ids or []


class LogicError(RetellToolError):
    """A precondition checked by this package was not met."""


class RemoteFailure(RetellToolError):
    """The Retell API answered with a non-success status or could not be reached."""

    def __init__(
        self,
        message: str,
        *,
        method: str,
        path: str,
        status_code: int | None = None,
        detail: Any = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.path = path
        self.status_code = status_code
        self.detail = detail


class RemoteNotFound(RemoteFailure, NotFound):
    """HTTP 404 from the Retell API."""

    def __init__(self, message: str, *, method: str, path: str, detail: Any = None) -> None:
        RemoteFailure.__init__(self, message, method=method, path=path, status_code=404, detail=detail)
        self.known_ids = []
