"""Ballot repositories."""

from app.repositories.ballot.tally import TallyRepository

__all__ = ["TallyRepository"]
