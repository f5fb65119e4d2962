"""Shared schema base and helpers. JSON keys are camelCase on the wire."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for request/response bodies: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def ensure_aware_datetime(v: Any) -> Any:
    """Accept datetime or ISO string; treat naive datetimes as UTC (common from frontends)."""
    if v is None or v == "":
        return None
    if isinstance(v, str):
        dt = datetime.fromisoformat(v.replace("Z", "+00:00"))
    elif isinstance(v, datetime):
        dt = v
    else:
        return v
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class MessageResponse(ApiModel):
    """Plain confirmation message."""

    message: str
