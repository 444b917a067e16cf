"""Ballot API views - thin layer over services."""

from app.container import container
from web.api.errors import validate_candidate, validate_identity

from .schemas import (
    CandidateVotesResponse,
    InitializeResponse,
    ResultItem,
    ResultsResponse,
    VoteResponse,
    WeightPreviewResponse,
)


def initialize_ballot() -> InitializeResponse:
    """Create the candidate set."""
    now = container.clock.now()
    container.ballot.initialize(now)

    return InitializeResponse(
        candidates=[c.value for c in container.ballot.candidates],
        initialized_at=now,
    )


def cast_vote(voter_id: str, candidate: str) -> VoteResponse:
    """Cast the caller's single vote."""
    voter_id = validate_identity(voter_id)
    candidate = validate_candidate(candidate)
    vote = container.ballot.vote(voter_id, candidate, container.clock.now())

    return VoteResponse(**vote.to_dict())


def get_votes(candidate: str) -> CandidateVotesResponse:
    """Get the accumulated weight for a candidate."""
    candidate = validate_candidate(candidate)
    total = container.ballot.votes_for(candidate)

    return CandidateVotesResponse(candidate=candidate, total=total)


def get_results() -> ResultsResponse:
    """Get totals for all candidates."""
    data = container.ballot.results()

    items = [ResultItem(candidate=r.candidate, total=r.total) for r in data]

    return ResultsResponse(items=items, total_weight=sum(r.total for r in data))


def get_weight_preview() -> WeightPreviewResponse:
    """Preview vote weight at the current instant."""
    now = container.clock.now()
    with container.db.transaction():
        weight = container.ballot.preview_weight(now)
        sentiment = container.sentiment.peek(now)

    return WeightPreviewResponse(at=now, sentiment=sentiment, weight=weight)
