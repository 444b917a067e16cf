"""Voter model - one row per identity that has voted."""

VOTER_DDL = """
CREATE TABLE IF NOT EXISTS voter (
    voter_id VARCHAR PRIMARY KEY,
    candidate VARCHAR NOT NULL,
    weight INTEGER NOT NULL,
    sentiment INTEGER NOT NULL,
    voted_at BIGINT NOT NULL
)
"""

VOTER_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_voter_candidate ON voter(candidate)",
]
