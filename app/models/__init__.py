"""Models package - DDL and entities for all domains."""

from app.models.ballot import (
    BALLOT_DDL,
    BALLOT_ROW_ID,
    CANDIDATE_TOTAL_DDL,
    VOTER_DDL,
    VOTER_INDEXES,
    Candidate,
    CandidateTotal,
    VoteCast,
)
from app.models.common import AUDIT_DDL, AuditRecord, BaseEntity
from app.models.sentiment import (
    SENTIMENT_DDL,
    SENTIMENT_ROW_ID,
    SentimentCause,
    SentimentChanged,
    SentimentState,
)

ALL_DDL = [
    # Sentiment
    SENTIMENT_DDL,
    # Ballot
    BALLOT_DDL,
    CANDIDATE_TOTAL_DDL,
    VOTER_DDL,
    *VOTER_INDEXES,
    # Common
    AUDIT_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "AUDIT_DDL",
    "AuditRecord",
    # Sentiment
    "SENTIMENT_DDL",
    "SENTIMENT_ROW_ID",
    "SentimentCause",
    "SentimentChanged",
    "SentimentState",
    # Ballot
    "BALLOT_DDL",
    "BALLOT_ROW_ID",
    "CANDIDATE_TOTAL_DDL",
    "VOTER_DDL",
    "VOTER_INDEXES",
    "Candidate",
    "CandidateTotal",
    "VoteCast",
    # All DDL
    "ALL_DDL",
]
