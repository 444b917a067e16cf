"""Sentiment repositories."""

from app.repositories.sentiment.state import SentimentRepository

__all__ = ["SentimentRepository"]
