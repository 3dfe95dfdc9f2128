"""Argument validation: raw tool arguments in, normalized contract model out."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from retell_mcp.errors import ValidationError
from retell_mcp.schemas.base import ToolInput

M = TypeVar("M", bound=ToolInput)


def validate_arguments(tool: str, model: type[M], arguments: Any) -> M:
    """Validate *arguments* against *model*, filling declared defaults.

    Raises ValidationError listing every offending field, not just the first.
    """
    try:
        return model.model_validate({} if arguments is None else arguments)
    except PydanticValidationError as exc:
        raise ValidationError(tool, [_describe(err) for err in exc.errors(include_url=False)]) from exc


def _describe(err: dict[str, Any]) -> dict[str, str]:
    return {
        "field": ".".join(str(part) for part in err["loc"]),
        "message": err["msg"],
        "type": err["type"],
    }
