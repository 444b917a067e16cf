"""Tests for WeightedBallot."""

import threading

import pytest
from loguru import logger

from app.errors import (
    AlreadyInitializedError,
    AlreadyVotedError,
    ClockError,
    NotInitializedError,
    UnknownCandidateError,
)
from app.models.ballot import Candidate, VoteCast
from app.repositories import AuditRepository, TallyRepository
from app.services import WeightedBallot
from tests.conftest import START, bump


class TestInitialize:
    def test_creates_zero_totals(self, ready_ballot):
        assert [r.total for r in ready_ballot.results()] == [0, 0, 0]
        assert ready_ballot.initialized

    def test_second_call_fails(self, ready_ballot):
        with pytest.raises(AlreadyInitializedError):
            ready_ballot.initialize(START)

    def test_operations_require_setup(self, ballot):
        with pytest.raises(NotInitializedError):
            ballot.vote("v1", Candidate.ALPHA, START)
        with pytest.raises(NotInitializedError):
            ballot.votes_for(Candidate.ALPHA)
        with pytest.raises(NotInitializedError):
            ballot.preview_weight(START)

    def test_subset_of_candidates(self, db, clock):
        ballot = WeightedBallot(db, clock, TallyRepository(db), AuditRepository(db), candidates=["ALPHA", "BRAVO"])
        ballot.initialize(START)
        assert ballot.candidates == (Candidate.ALPHA, Candidate.BRAVO)
        with pytest.raises(UnknownCandidateError):
            ballot.vote("v1", "CHARLIE", START)


class TestVote:
    def test_neutral_weight(self, ready_ballot):
        vote = ready_ballot.vote("v1", "ALPHA", START)
        assert vote.weight == 1
        assert ready_ballot.votes_for("ALPHA") == 1

    def test_positive_sentiment(self, ready_ballot, clock):
        bump(clock, 37)
        vote = ready_ballot.vote("v1", "BRAVO", START)
        assert vote.sentiment == 37
        assert vote.weight == 8
        assert ready_ballot.votes_for("BRAVO") == 8

    def test_negative_sentiment(self, ready_ballot, clock):
        bump(clock, -15)
        assert ready_ballot.vote("v1", "ALPHA", START).weight == 1

    def test_small_negative_sentiment(self, ready_ballot, clock):
        bump(clock, -5)
        assert ready_ballot.vote("v1", "ALPHA", START).weight == 1

    def test_vote_applies_decay(self, ready_ballot, clock):
        bump(clock, 30)
        vote = ready_ballot.vote("v1", "CHARLIE", START + 10)
        assert vote.sentiment == 20
        assert vote.weight == 5
        assert clock.state().last_update == START + 10

    def test_totals_accumulate(self, ready_ballot, clock):
        ready_ballot.vote("v1", "ALPHA", START)
        bump(clock, 25)
        ready_ballot.vote("v2", "ALPHA", START)
        assert ready_ballot.votes_for("ALPHA") == 7
        assert ready_ballot.results()[0].candidate == "ALPHA"

    def test_single_vote_per_identity(self, ready_ballot):
        ready_ballot.vote("v1", "ALPHA", START)
        with pytest.raises(AlreadyVotedError):
            ready_ballot.vote("v1", "BRAVO", START)
        with pytest.raises(AlreadyVotedError):
            ready_ballot.vote("v1", "ALPHA", START + 100)
        assert ready_ballot.votes_for("BRAVO") == 0

    def test_unknown_candidate(self, ready_ballot):
        with pytest.raises(UnknownCandidateError):
            ready_ballot.vote("v1", "DELTA", START)
        assert not ready_ballot.has_voted("v1")
        with pytest.raises(UnknownCandidateError):
            ready_ballot.votes_for("DELTA")

    def test_emits_event(self, ready_ballot, clock, db):
        bump(clock, 12)
        ready_ballot.vote("v1", "ALPHA", START)
        events = AuditRepository(db).events(VoteCast.kind)
        assert len(events) == 1
        assert events[0].payload == {
            "voter_id": "v1",
            "candidate": "ALPHA",
            "weight": 3,
            "sentiment": 12,
            "at": START,
        }


class TestAtomicity:
    def test_backward_clock_leaves_state(self, ready_ballot, clock, db):
        clock.increase(START + 50, True)
        with pytest.raises(ClockError):
            ready_ballot.vote("v1", "ALPHA", START + 10)

        assert not ready_ballot.has_voted("v1")
        assert ready_ballot.votes_for("ALPHA") == 0
        assert AuditRepository(db).count(VoteCast.kind) == 0

        # A corrected instant succeeds
        assert ready_ballot.vote("v1", "ALPHA", START + 50).weight == 1

    def test_failed_vote_rolls_back_decay(self, ready_ballot, clock, db, monkeypatch):
        bump(clock, 40)

        def broken(vote):
            raise RuntimeError("disk full")

        monkeypatch.setattr(ready_ballot._tally, "record_voter", broken)
        with pytest.raises(RuntimeError):
            ready_ballot.vote("v1", "ALPHA", START + 10)

        state = clock.state()
        assert state.value == 40
        assert state.last_update == START
        assert ready_ballot.votes_for("ALPHA") == 0

    def test_rolled_back_vote_is_not_logged(self, ready_ballot, clock, monkeypatch):
        bump(clock, 40)
        lines = []
        sink = logger.add(
            lambda m: lines.append(m.record["extra"]["kind"]),
            filter=lambda r: r["extra"].get("audit", False),
        )
        try:
            original = ready_ballot._tally.record_voter

            def broken(vote):
                raise RuntimeError("disk full")

            monkeypatch.setattr(ready_ballot._tally, "record_voter", broken)
            with pytest.raises(RuntimeError):
                ready_ballot.vote("v1", "ALPHA", START + 10)
            assert lines == []

            monkeypatch.setattr(ready_ballot._tally, "record_voter", original)
            ready_ballot.vote("v1", "ALPHA", START + 10)
            assert lines == ["SentimentChanged", "VoteCast"]
        finally:
            logger.remove(sink)


class TestPreview:
    def test_preview_uses_projected_sentiment(self, ready_ballot, clock):
        bump(clock, 60)
        assert ready_ballot.preview_weight(START) == 11
        assert ready_ballot.preview_weight(START + 70) == 1

    def test_preview_does_not_mutate(self, ready_ballot, clock):
        bump(clock, 60)
        ready_ballot.preview_weight(START + 30)
        assert clock.state().value == 60

    def test_preview_after_voting(self, ready_ballot):
        ready_ballot.vote("v1", "ALPHA", START)
        assert ready_ballot.preview_weight(START) == 1


class TestConcurrency:
    def test_same_voter_many_threads(self, ready_ballot):
        outcomes = []
        lock = threading.Lock()

        def cast():
            try:
                ready_ballot.vote("same", "ALPHA", START)
                result = "ok"
            except AlreadyVotedError:
                result = "dup"
            with lock:
                outcomes.append(result)

        threads = [threading.Thread(target=cast) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count("ok") == 1
        assert outcomes.count("dup") == 15
        assert ready_ballot.votes_for("ALPHA") == 1

    def test_distinct_voters_many_threads(self, ready_ballot):
        def cast(i):
            ready_ballot.vote(f"v{i}", list(Candidate)[i % 3], START)

        threads = [threading.Thread(target=cast, args=(i,)) for i in range(30)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sum(r.total for r in ready_ballot.results()) == 30
