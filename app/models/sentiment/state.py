"""Sentiment state model - single row holding the shared score."""

SENTIMENT_DDL = """
CREATE TABLE IF NOT EXISTS sentiment_state (
    id INTEGER PRIMARY KEY,
    value INTEGER NOT NULL,
    last_update BIGINT NOT NULL
)
"""

SENTIMENT_ROW_ID = 1
