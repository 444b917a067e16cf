"""Sentiment API."""

from web.api.sentiment.views import (
    decrease_sentiment,
    get_sentiment,
    increase_sentiment,
    reset_sentiment,
)

__all__ = [
    "get_sentiment",
    "increase_sentiment",
    "decrease_sentiment",
    "reset_sentiment",
]
