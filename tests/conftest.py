"""Shared fixtures - every test gets its own in-memory ledger."""

import pytest

from app.repositories import AuditRepository, Database, SentimentRepository, TallyRepository
from app.services import SentimentClock, WeightedBallot

START = 1_000


@pytest.fixture
def db():
    database = Database(":memory:")
    yield database
    database.close()


@pytest.fixture
def clock(db):
    sentiment = SentimentClock(db, SentimentRepository(db), AuditRepository(db))
    sentiment.create(START)
    return sentiment


@pytest.fixture
def ballot(db, clock):
    return WeightedBallot(db, clock, TallyRepository(db), AuditRepository(db))


@pytest.fixture
def ready_ballot(ballot):
    ballot.initialize(START)
    return ballot


def bump(clock: SentimentClock, times: int, now: int = START) -> int:
    """Move sentiment by `times` owner bumps (negative = decreases) at one instant."""
    value = clock.peek(now)
    for _ in range(abs(times)):
        value = clock.increase(now, True) if times > 0 else clock.decrease(now, True)
    return value
