"""
Pydantic base models for request/response validation.

DESIGN PRINCIPLE:
- Models should reflect data structure, not business logic
- Python attributes are snake_case, JSON on the wire is camelCase
- Every response body is wrapped in the same envelope
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from fastapi.encoders import jsonable_encoder
from typing import Any


class CamelModel(BaseModel):
    """Base for all domain models: camelCase aliases, populate by either name."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


def ok(data: Any) -> dict:
    """Wrap a payload in a success envelope, serialising models by alias."""
    return {"success": True, "data": jsonable_encoder(data, by_alias=True)}


def fail(message: str) -> dict:
    return {"success": False, "error": message}
