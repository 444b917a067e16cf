"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("BALLOT_DB_PATH", "ballot.duckdb")

# Logging
LOG_DIR = Path(os.getenv("BALLOT_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("BALLOT_LOG_LEVEL", "INFO")

# Identity
OWNER_ID = os.getenv("BALLOT_OWNER_ID", "owner")

# Sentiment
MIN_SENTIMENT = -100
MAX_SENTIMENT = 100
DECAY_RATE = 1  # units per second

# Weight
BASE_WEIGHT = 1
BONUS_STEP = 5
MAX_BONUS = 10
PENALTY_STEP = 10
