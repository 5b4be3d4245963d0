"""
Base schema with camelCase JSON keys.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes to camelCase; accepts camelCase or snake_case input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    message: str


class ErrorResponse(CamelModel):
    """Body of every error response."""

    error: str
    code: str
