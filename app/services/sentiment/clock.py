"""Sentiment clock - the shared, time-decaying sentiment score."""

from loguru import logger

from app.errors import ClockError, UnauthorizedError
from app.models.sentiment import SentimentCause, SentimentChanged, SentimentState
from app.repositories.common import AuditRepository
from app.repositories.db import Database
from app.repositories.sentiment import SentimentRepository
from helpers import formulas
from settings import DECAY_RATE


class SentimentClock:
    """Owns the sentiment value, its decay toward zero, and its bounds.

    Every method takes the current instant explicitly. Instants are
    integer seconds and must never be earlier than the last recorded
    update; a backward step raises ClockError and leaves state untouched.
    """

    def __init__(
        self,
        db: Database,
        sentiment_repo: SentimentRepository,
        audit_repo: AuditRepository,
        rate: int = DECAY_RATE,
    ):
        self._db = db
        self._sentiment = sentiment_repo
        self._audit = audit_repo
        self._rate = rate
        logger.debug("SentimentClock initialized (rate={})", rate)

    def create(self, now: int) -> SentimentState:
        """Create the neutral score at `now` if it does not exist yet."""
        with self._db.transaction():
            return self._sentiment.create(now)

    def state(self) -> SentimentState:
        """Stored value and last update, without applying decay."""
        with self._db.transaction():
            return self._load()

    def _load(self) -> SentimentState:
        state = self._sentiment.get()
        if state is None:
            raise RuntimeError("Sentiment state has not been created")
        return state

    def _elapsed(self, state: SentimentState, now: int) -> int:
        if now < state.last_update:
            logger.warning("Rejected t={}: last update was t={}", now, state.last_update)
            raise ClockError(now, state.last_update)
        return now - state.last_update

    def _emit(self, previous: int, value: int, cause: SentimentCause, now: int) -> None:
        self._audit.record(SentimentChanged(new_value=value, previous=previous, cause=cause, at=now), now)

    def peek(self, now: int) -> int:
        """Value that apply_decay(now) would leave behind, without writing it."""
        with self._db.transaction():
            state = self._load()
            return formulas.decay(state.value, self._elapsed(state, now), self._rate)

    def apply_decay(self, now: int) -> int:
        """Decay the stored value up to `now` and return it."""
        with self._db.transaction():
            state = self._load()
            elapsed = self._elapsed(state, now)
            if elapsed == 0:
                return state.value

            value = formulas.decay(state.value, elapsed, self._rate)
            self._sentiment.save(SentimentState(value=value, last_update=now))
            if value != state.value:
                self._emit(state.value, value, SentimentCause.DECAY, now)
                logger.debug("Decayed {} -> {} over {}s", state.value, value, elapsed)
            return value

    def increase(self, now: int, privileged: bool) -> int:
        """Bump sentiment up by one, saturating at MAX_SENTIMENT."""
        return self._bump(now, privileged, 1, SentimentCause.INCREASE)

    def decrease(self, now: int, privileged: bool) -> int:
        """Bump sentiment down by one, saturating at MIN_SENTIMENT."""
        return self._bump(now, privileged, -1, SentimentCause.DECREASE)

    def _bump(self, now: int, privileged: bool, delta: int, cause: SentimentCause) -> int:
        if not privileged:
            logger.warning("Unauthorized sentiment {}", cause)
            raise UnauthorizedError(cause)

        with self._db.transaction():
            current = self.apply_decay(now)
            value = formulas.clamp(current + delta)
            self._sentiment.save(SentimentState(value=value, last_update=now))
            self._emit(current, value, cause, now)

        logger.info("Sentiment {}: {} -> {}", cause, current, value)
        return value

    def reset(self, now: int, privileged: bool) -> int:
        """Force sentiment to zero. Pending decay is discarded, not applied."""
        if not privileged:
            logger.warning("Unauthorized sentiment reset")
            raise UnauthorizedError(SentimentCause.RESET)

        with self._db.transaction():
            state = self._load()
            self._elapsed(state, now)
            self._sentiment.save(SentimentState(value=0, last_update=now))
            self._emit(state.value, 0, SentimentCause.RESET, now)

        logger.info("Sentiment reset: {} -> 0", state.value)
        return 0
