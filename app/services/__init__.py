"""Services package - service class exports."""

from app.services.auth import StaticAuthority
from app.services.ballot import WeightedBallot
from app.services.clock_source import FixedClock, SystemClock
from app.services.sentiment import SentimentClock

__all__ = [
    "FixedClock",
    "SentimentClock",
    "StaticAuthority",
    "SystemClock",
    "WeightedBallot",
]
