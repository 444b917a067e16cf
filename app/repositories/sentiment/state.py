"""Sentiment repository - access to the single sentiment row."""

from loguru import logger

from app.models.sentiment import SENTIMENT_ROW_ID, SentimentState
from app.repositories.base import BaseRepository


class SentimentRepository(BaseRepository):
    """Repository for the stored sentiment value."""

    def get(self) -> SentimentState | None:
        """Load the sentiment row, if created."""
        row = self.fetchone(
            "SELECT value, last_update FROM sentiment_state WHERE id = ?",
            [SENTIMENT_ROW_ID],
        )
        if row is None:
            return None
        return SentimentState(value=int(row[0]), last_update=int(row[1]))

    def create(self, now: int) -> SentimentState:
        """Create the neutral sentiment row at `now` unless it already exists."""
        existing = self.get()
        if existing is not None:
            return existing

        self.execute(
            "INSERT INTO sentiment_state (id, value, last_update) VALUES (?, ?, ?)",
            [SENTIMENT_ROW_ID, 0, now],
        )
        logger.info("Sentiment created at t={}", now)
        return SentimentState(value=0, last_update=now)

    def save(self, state: SentimentState) -> None:
        """Persist value and last_update."""
        self.execute(
            "UPDATE sentiment_state SET value = ?, last_update = ? WHERE id = ?",
            [state.value, state.last_update, SENTIMENT_ROW_ID],
        )
