"""Ballot setup marker - row exists once the ballot is initialized."""

BALLOT_DDL = """
CREATE TABLE IF NOT EXISTS ballot_state (
    id INTEGER PRIMARY KEY,
    initialized_at BIGINT NOT NULL
)
"""

BALLOT_ROW_ID = 1
