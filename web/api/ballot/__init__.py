"""Ballot API."""

from web.api.ballot.views import (
    cast_vote,
    get_results,
    get_votes,
    get_weight_preview,
    initialize_ballot,
)

__all__ = [
    "initialize_ballot",
    "cast_vote",
    "get_votes",
    "get_results",
    "get_weight_preview",
]
