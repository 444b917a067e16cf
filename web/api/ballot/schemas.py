"""Ballot API response schemas."""

from pydantic import BaseModel, Field


class InitializeResponse(BaseModel):
    """Ballot setup result."""

    candidates: list[str]
    initialized_at: int


class VoteResponse(BaseModel):
    """Accepted vote."""

    voter_id: str
    candidate: str
    weight: int = Field(ge=1)
    sentiment: int
    at: int


class CandidateVotesResponse(BaseModel):
    """Total for one candidate."""

    candidate: str
    total: int = Field(ge=0)


class ResultItem(BaseModel):
    """Total for a candidate in the results table."""

    candidate: str
    total: int = Field(ge=0)


class ResultsResponse(BaseModel):
    """All totals."""

    items: list[ResultItem]
    total_weight: int


class WeightPreviewResponse(BaseModel):
    """Weight a vote would carry right now."""

    at: int
    sentiment: int
    weight: int = Field(ge=1)
