"""Ballot services."""

from app.services.ballot.ledger import WeightedBallot

__all__ = ["WeightedBallot"]
