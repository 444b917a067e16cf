"""Sentiment API response schemas."""

from pydantic import BaseModel, Field

from settings import MAX_SENTIMENT, MIN_SENTIMENT


class SentimentResponse(BaseModel):
    """Current (decayed) sentiment."""

    value: int = Field(ge=MIN_SENTIMENT, le=MAX_SENTIMENT)
    at: int
    last_update: int
    neutral_in: int = Field(ge=0)


class SentimentChangeResponse(BaseModel):
    """Result of an owner mutation."""

    value: int = Field(ge=MIN_SENTIMENT, le=MAX_SENTIMENT)
    cause: str
    at: int
