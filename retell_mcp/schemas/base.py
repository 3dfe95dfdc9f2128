"""Base models shared by every tool contract."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class ToolInput(BaseModel):
    """Arguments of one tool.

    Field aliases are the argument names callers send; attribute names are the
    wire names the Retell API expects, so ``payload()`` is directly a request body.
    Unknown arguments are rejected unless a subclass opts into ``extra="allow"``.
    """

    model_config = ConfigDict(extra="forbid")

    # Fields whose values are forwarded exactly as received (no None-stripping
    # inside them), e.g. opaque flow nodes.
    opaque_fields: ClassVar[tuple[str, ...]] = ()

    def payload(self) -> dict[str, Any]:
        data = self.model_dump(exclude_none=True)
        for name in self.opaque_fields:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data


class NoArguments(ToolInput):
    """Contract for list/status tools that take no arguments."""


class Variant(BaseModel):
    """One member of a ``type``-tagged union; fields of other members are rejected."""

    model_config = ConfigDict(extra="forbid")


class OutputRecord(BaseModel):
    """Remote-owned record: known keys are declared, unknown keys are kept."""

    model_config = ConfigDict(extra="allow")


class DeletionOutput(BaseModel):
    success: bool
    message: str
