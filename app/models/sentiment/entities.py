"""Sentiment domain entities."""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from app.models.common import BaseEntity


class SentimentCause(StrEnum):
    """Why the sentiment value changed."""

    DECAY = "decay"
    INCREASE = "increase"
    DECREASE = "decrease"
    RESET = "reset"


@dataclass
class SentimentState(BaseEntity):
    """Sentiment value and the instant it was last synchronized."""

    value: int
    last_update: int


@dataclass
class SentimentChanged(BaseEntity):
    """Notification emitted whenever the stored sentiment changes."""

    kind: ClassVar[str] = "SentimentChanged"

    new_value: int
    previous: int
    cause: SentimentCause
    at: int
