"""Sentiment services."""

from app.services.sentiment.clock import SentimentClock

__all__ = ["SentimentClock"]
