"""Candidate model - the fixed candidate set and their totals."""

from enum import StrEnum


class Candidate(StrEnum):
    """Known candidates."""

    ALPHA = "ALPHA"
    BRAVO = "BRAVO"
    CHARLIE = "CHARLIE"


CANDIDATE_TOTAL_DDL = """
CREATE TABLE IF NOT EXISTS candidate_total (
    candidate VARCHAR PRIMARY KEY,
    total UBIGINT NOT NULL
)
"""
