"""Pure sentiment and weight formulas - no state, easily testable."""

from settings import (
    BASE_WEIGHT,
    BONUS_STEP,
    DECAY_RATE,
    MAX_BONUS,
    MAX_SENTIMENT,
    MIN_SENTIMENT,
    PENALTY_STEP,
)


def clamp(value: int, low: int = MIN_SENTIMENT, high: int = MAX_SENTIMENT) -> int:
    """Saturate value into [low, high]."""
    return max(low, min(high, value))


def decay(value: int, elapsed: int, rate: int = DECAY_RATE) -> int:
    """Move value toward zero by elapsed * rate, never crossing zero."""
    if elapsed < 0:
        raise ValueError(f"elapsed must be >= 0, got {elapsed}")

    amount = elapsed * rate
    if value > 0:
        return max(0, value - amount)
    if value < 0:
        return min(0, value + amount)
    return 0


def seconds_to_neutral(value: int, rate: int = DECAY_RATE) -> int:
    """Elapsed seconds after which decay leaves value at exactly zero."""
    magnitude = abs(value)
    return -(-magnitude // rate)


def vote_weight(sentiment: int) -> int:
    """Weight of a single vote cast at the given sentiment.

    Positive sentiment adds one point per BONUS_STEP, capped at MAX_BONUS.
    Negative sentiment can only pull the weight down to BASE_WEIGHT, and
    only once its magnitude reaches PENALTY_STEP; with BASE_WEIGHT = 1 it
    therefore never changes the result. The floor is always 1.
    """
    if sentiment > 0:
        bonus = min(sentiment // BONUS_STEP, MAX_BONUS)
        return BASE_WEIGHT + bonus

    if sentiment < 0:
        reduction = -sentiment // PENALTY_STEP
        if reduction >= BASE_WEIGHT:
            return 1
        return max(1, BASE_WEIGHT - reduction)

    return BASE_WEIGHT
