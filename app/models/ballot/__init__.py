"""Ballot domain models - candidates, voters, and vote entities."""

from app.models.ballot.ballot import BALLOT_DDL, BALLOT_ROW_ID
from app.models.ballot.candidate import CANDIDATE_TOTAL_DDL, Candidate
from app.models.ballot.entities import CandidateTotal, VoteCast
from app.models.ballot.voter import VOTER_DDL, VOTER_INDEXES

__all__ = [
    "BALLOT_DDL",
    "BALLOT_ROW_ID",
    "CANDIDATE_TOTAL_DDL",
    "VOTER_DDL",
    "VOTER_INDEXES",
    "Candidate",
    "CandidateTotal",
    "VoteCast",
]
