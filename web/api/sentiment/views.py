"""Sentiment API views - thin layer over services."""

from app.container import container
from app.models.sentiment import SentimentCause
from helpers import formulas
from web.api.errors import validate_identity

from .schemas import SentimentChangeResponse, SentimentResponse


def get_sentiment() -> SentimentResponse:
    """Get sentiment as of now, without writing the decay."""
    now = container.clock.now()
    with container.db.transaction():
        value = container.sentiment.peek(now)
        state = container.sentiment.state()

    return SentimentResponse(
        value=value,
        at=now,
        last_update=state.last_update,
        neutral_in=formulas.seconds_to_neutral(value),
    )


def _privileged(caller_id: str) -> bool:
    return container.authority.is_privileged(validate_identity(caller_id, "caller_id"))


def increase_sentiment(caller_id: str) -> SentimentChangeResponse:
    """Owner bumps sentiment up."""
    now = container.clock.now()
    value = container.sentiment.increase(now, _privileged(caller_id))
    return SentimentChangeResponse(value=value, cause=SentimentCause.INCREASE.value, at=now)


def decrease_sentiment(caller_id: str) -> SentimentChangeResponse:
    """Owner bumps sentiment down."""
    now = container.clock.now()
    value = container.sentiment.decrease(now, _privileged(caller_id))
    return SentimentChangeResponse(value=value, cause=SentimentCause.DECREASE.value, at=now)


def reset_sentiment(caller_id: str) -> SentimentChangeResponse:
    """Owner resets sentiment to zero."""
    now = container.clock.now()
    value = container.sentiment.reset(now, _privileged(caller_id))
    return SentimentChangeResponse(value=value, cause=SentimentCause.RESET.value, at=now)
