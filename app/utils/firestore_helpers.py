"""
Firestore query and document helpers.

NOTE: For firebase_admin SDK, we use positional arguments for where()
which still work. The deprecation warning is just a warning.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel


def where_filter(query, field_path: str, op_string: str, value):
    """
    Helper function for Firestore queries.

    Usage:
        query = where_filter(collection, "user_id", "==", user_id)
        query = where_filter(query, "severity", "==", "HIGH")
    """
    return query.where(field_path, op_string, value)


def to_document(model: BaseModel) -> Dict[str, Any]:
    """
    Convert a model to a Firestore document.

    Field names stay snake_case, datetimes stay datetimes (stored as
    Firestore timestamps) and enums are flattened to their values.
    """
    return {key: _plain(value) for key, value in model.model_dump().items()}


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def to_datetime(value: Any) -> datetime:
    """
    Normalise a Firestore timestamp value to an aware UTC datetime.

    Handles datetime (including DatetimeWithNanoseconds), objects exposing
    to_datetime(), and ISO strings.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if hasattr(value, "to_datetime"):
        return to_datetime(value.to_datetime())
    if isinstance(value, str):
        return to_datetime(datetime.fromisoformat(value.replace("Z", "+00:00")))
    raise TypeError(f"Unsupported timestamp type: {type(value)}")
