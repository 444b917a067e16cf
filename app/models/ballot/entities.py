"""Ballot domain entities."""

from dataclasses import dataclass
from typing import ClassVar

from app.models.common import BaseEntity


@dataclass
class VoteCast(BaseEntity):
    """Notification emitted for every accepted vote."""

    kind: ClassVar[str] = "VoteCast"

    voter_id: str
    candidate: str
    weight: int
    sentiment: int
    at: int


@dataclass
class CandidateTotal(BaseEntity):
    """Accumulated weight for one candidate."""

    candidate: str
    total: int
