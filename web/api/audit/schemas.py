"""Audit API response schemas."""

from typing import Any

from pydantic import BaseModel


class EventItem(BaseModel):
    """One recorded notification."""

    seq: int
    kind: str
    payload: dict[str, Any]
    recorded_at: int


class EventsResponse(BaseModel):
    """Recorded notifications in order."""

    kind: str | None
    items: list[EventItem]
