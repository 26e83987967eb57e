"""
TASKFLOW - Shared Schemas

Base model for the JSON wire format (camelCase field names) and small
shared responses.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case attributes under camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OkResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    error: str
