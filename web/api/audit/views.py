"""Audit API views."""

from app.container import container
from app.models.ballot import VoteCast
from app.models.sentiment import SentimentChanged
from web.api.errors import ValidationError

from .schemas import EventItem, EventsResponse

EVENT_KINDS = (VoteCast.kind, SentimentChanged.kind)


def get_events(kind: str | None = None) -> EventsResponse:
    """List recorded events, optionally of one kind."""
    if kind is not None and kind not in EVENT_KINDS:
        raise ValidationError(f"Invalid kind: {kind}. Must be one of {', '.join(EVENT_KINDS)}")

    items = [EventItem(**r.to_dict()) for r in container.audit.events(kind)]

    return EventsResponse(kind=kind, items=items)
