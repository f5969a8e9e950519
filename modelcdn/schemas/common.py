"""Shared API schema bases."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes field names as camelCase (viewUrl, cdnUrl) and accepts either form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    code: str
    details: dict[str, Any] | None = None


class SuccessResponse(BaseModel):
    """Plain acknowledgement (logout, login)."""

    success: bool = True
    message: str
