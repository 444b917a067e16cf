"""Tests for API views over the container."""

import threading

import pytest

from app.container import container
from app.errors import AlreadyVotedError, NotInitializedError, UnauthorizedError, UnknownCandidateError
from app.services import FixedClock, StaticAuthority
from web.api.audit import get_events
from web.api.ballot import cast_vote, get_results, get_votes, get_weight_preview, initialize_ballot
from web.api.errors import ValidationError
from web.api.sentiment import decrease_sentiment, get_sentiment, increase_sentiment, reset_sentiment

OWNER = "admin"


@pytest.fixture
def api():
    clock = FixedClock(500)
    container.init(db_path=":memory:", clock=clock, authority=StaticAuthority(OWNER))
    yield clock
    container.reset()


class TestBallotViews:
    def test_initialize(self, api):
        resp = initialize_ballot()
        assert resp.candidates == ["ALPHA", "BRAVO", "CHARLIE"]
        assert resp.initialized_at == 500

    def test_vote_before_initialize(self, api):
        with pytest.raises(NotInitializedError):
            cast_vote("alice", "ALPHA")

    def test_vote_and_results(self, api):
        initialize_ballot()
        for _ in range(20):
            increase_sentiment(OWNER)

        resp = cast_vote("alice", "bravo")
        assert resp.candidate == "BRAVO"
        assert resp.weight == 5

        results = get_results()
        assert results.items[0].candidate == "BRAVO"
        assert results.total_weight == 5
        assert get_votes("BRAVO").total == 5

    def test_duplicate_vote(self, api):
        initialize_ballot()
        cast_vote("alice", "ALPHA")
        with pytest.raises(AlreadyVotedError):
            cast_vote(" alice ", "BRAVO")

    def test_unknown_candidate(self, api):
        initialize_ballot()
        with pytest.raises(UnknownCandidateError):
            get_votes("ZULU")

    def test_blank_voter(self, api):
        initialize_ballot()
        with pytest.raises(ValidationError):
            cast_vote("  ", "ALPHA")

    def test_preview_follows_clock(self, api):
        initialize_ballot()
        for _ in range(60):
            increase_sentiment(OWNER)
        assert get_weight_preview().weight == 11

        api.advance(70)
        preview = get_weight_preview()
        assert preview.sentiment == 0
        assert preview.weight == 1


class TestSentimentViews:
    def test_owner_mutations(self, api):
        assert increase_sentiment(OWNER).value == 1
        assert decrease_sentiment(OWNER).value == 0
        assert decrease_sentiment(OWNER).value == -1
        assert reset_sentiment(OWNER).value == 0

    def test_non_owner_rejected(self, api):
        with pytest.raises(UnauthorizedError):
            increase_sentiment("mallory")
        assert get_sentiment().value == 0

    def test_get_sentiment_is_read_only(self, api):
        for _ in range(10):
            increase_sentiment(OWNER)
        api.advance(4)

        resp = get_sentiment()
        assert resp.value == 6
        assert resp.last_update == 500
        assert resp.neutral_in == 6


class TestAuditViews:
    def test_events_in_order(self, api):
        initialize_ballot()
        increase_sentiment(OWNER)
        cast_vote("alice", "ALPHA")

        kinds = [e.kind for e in get_events().items]
        assert kinds == ["SentimentChanged", "VoteCast"]
        assert len(get_events("VoteCast").items) == 1

    def test_invalid_kind(self, api):
        with pytest.raises(ValidationError):
            get_events("Nope")


class TestConsistentReads:
    def test_preview_pairs_match_under_owner_writes(self, api):
        initialize_ballot()
        stop = threading.Event()

        def owner():
            for _ in range(150):
                if stop.is_set():
                    break
                increase_sentiment(OWNER)

        writer = threading.Thread(target=owner)
        writer.start()
        try:
            pairs = [get_weight_preview() for _ in range(300)]
        finally:
            stop.set()
            writer.join()

        for p in pairs:
            expected = 1 + min(p.sentiment // 5, 10) if p.sentiment > 0 else 1
            assert p.weight == expected, (p.sentiment, p.weight)

    def test_sentiment_reads_match_under_owner_writes(self, api):
        stop = threading.Event()

        def owner():
            for _ in range(60):
                if stop.is_set():
                    break
                increase_sentiment(OWNER)

        for _ in range(30):
            increase_sentiment(OWNER)
        api.advance(10)

        writer = threading.Thread(target=owner)
        writer.start()
        try:
            reads = [get_sentiment() for _ in range(200)]
        finally:
            stop.set()
            writer.join()

        for r in reads:
            # Either the pre-write decayed value or a value synchronized at `at`
            if r.last_update == 500:
                assert r.value == 20
            else:
                assert r.last_update == r.at
                assert r.value > 20
            assert r.neutral_in == r.value
