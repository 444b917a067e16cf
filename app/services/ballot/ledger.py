"""Weighted ballot - per-candidate totals and one vote per identity."""

from collections.abc import Iterable

from loguru import logger

from app.errors import (
    AlreadyInitializedError,
    AlreadyVotedError,
    NotInitializedError,
    UnknownCandidateError,
)
from app.models.ballot import Candidate, CandidateTotal, VoteCast
from app.repositories.ballot import TallyRepository
from app.repositories.common import AuditRepository
from app.repositories.db import Database
from app.services.sentiment import SentimentClock
from helpers import formulas


class WeightedBallot:
    """Voting ledger whose vote weight follows the current sentiment."""

    def __init__(
        self,
        db: Database,
        clock: SentimentClock,
        tally_repo: TallyRepository,
        audit_repo: AuditRepository,
        candidates: Iterable[Candidate] = tuple(Candidate),
    ):
        self._db = db
        self._clock = clock
        self._tally = tally_repo
        self._audit = audit_repo
        self._candidates = tuple(Candidate(c) for c in candidates)
        logger.debug("WeightedBallot initialized with {} candidates", len(self._candidates))

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self._candidates

    @property
    def initialized(self) -> bool:
        return self._tally.is_initialized()

    def initialize(self, now: int) -> None:
        """Create zero totals for the candidate set. Runs once."""
        with self._db.transaction():
            if self._tally.is_initialized():
                raise AlreadyInitializedError()
            self._tally.create_candidates([c.value for c in self._candidates])
            self._tally.mark_initialized(now)

        logger.info("Ballot initialized: {}", ", ".join(self._candidates))

    def _require_initialized(self) -> None:
        if not self._tally.is_initialized():
            raise NotInitializedError()

    def _resolve(self, candidate: str) -> Candidate:
        try:
            resolved = Candidate(candidate)
        except ValueError:
            raise UnknownCandidateError(str(candidate)) from None
        if resolved not in self._candidates:
            raise UnknownCandidateError(resolved.value)
        return resolved

    def has_voted(self, voter_id: str) -> bool:
        return self._tally.has_voted(voter_id)

    def vote(self, voter_id: str, candidate: str, now: int) -> VoteCast:
        """Record the single vote of `voter_id`, weighted by current sentiment."""
        with self._db.transaction():
            self._require_initialized()
            if self._tally.has_voted(voter_id):
                logger.warning("Duplicate vote rejected: {}", voter_id)
                raise AlreadyVotedError(voter_id)
            resolved = self._resolve(candidate)

            sentiment = self._clock.apply_decay(now)
            weight = formulas.vote_weight(sentiment)

            vote = VoteCast(
                voter_id=voter_id,
                candidate=resolved.value,
                weight=weight,
                sentiment=sentiment,
                at=now,
            )
            self._tally.add_weight(resolved.value, weight)
            self._tally.record_voter(vote)
            self._audit.record(vote, now)

        logger.info("Vote: {} -> {} (weight={}, sentiment={})", voter_id, resolved, weight, sentiment)
        return vote

    def votes_for(self, candidate: str) -> int:
        """Accumulated weight for a candidate."""
        with self._db.transaction():
            self._require_initialized()
            resolved = self._resolve(candidate)
            return self._tally.get_total(resolved.value) or 0

    def results(self) -> list[CandidateTotal]:
        """Totals for every candidate, highest first."""
        with self._db.transaction():
            self._require_initialized()
            totals = self._tally.get_totals()

        result = [CandidateTotal(candidate=c.value, total=totals.get(c.value, 0)) for c in self._candidates]
        return sorted(result, key=lambda x: x.total, reverse=True)

    def preview_weight(self, now: int) -> int:
        """Weight a vote would carry at `now`; changes nothing."""
        with self._db.transaction():
            self._require_initialized()
            return formulas.vote_weight(self._clock.peek(now))
