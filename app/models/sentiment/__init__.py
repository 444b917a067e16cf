"""Sentiment domain models."""

from app.models.sentiment.entities import SentimentCause, SentimentChanged, SentimentState
from app.models.sentiment.state import SENTIMENT_DDL, SENTIMENT_ROW_ID

__all__ = [
    "SENTIMENT_DDL",
    "SENTIMENT_ROW_ID",
    "SentimentCause",
    "SentimentChanged",
    "SentimentState",
]
