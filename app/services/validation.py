"""Ledger state validation."""

from app.models.ballot import VoteCast
from app.models.sentiment import SENTIMENT_ROW_ID
from app.repositories.db import Database
from settings import BASE_WEIGHT, MAX_BONUS, MAX_SENTIMENT, MIN_SENTIMENT

MAX_WEIGHT = BASE_WEIGHT + MAX_BONUS


def snapshot_state(db: Database) -> dict:
    """Logical persisted layout of the ledger."""
    with db.transaction():
        sentiment = db.fetchone("SELECT value, last_update FROM sentiment_state WHERE id = ?", [SENTIMENT_ROW_ID])
        totals = db.fetchall("SELECT candidate, total FROM candidate_total ORDER BY candidate")
        voters = db.fetchall("SELECT voter_id FROM voter ORDER BY voter_id")
        initialized = db.fetchone("SELECT COUNT(*) FROM ballot_state")[0] > 0

    return {
        "sentiment_value": int(sentiment[0]) if sentiment else None,
        "last_update": int(sentiment[1]) if sentiment else None,
        "totals": {r[0]: int(r[1]) for r in totals},
        "voted": {r[0] for r in voters},
        "initialized": initialized,
    }


def validate_state(db: Database) -> dict:
    """Check persisted invariants of sentiment, totals, and voters."""
    issues = []
    stats = {}

    with db.transaction():
        sentiment = db.fetchone("SELECT value, last_update FROM sentiment_state WHERE id = ?", [SENTIMENT_ROW_ID])
        total_sum = db.fetchone("SELECT COALESCE(SUM(total), 0), COUNT(*) FROM candidate_total")
        voter_check = db.fetchone(
            """
            SELECT
                COUNT(*) as voters,
                COALESCE(SUM(weight), 0) as weight_sum,
                SUM(CASE WHEN weight < 1 OR weight > ? THEN 1 ELSE 0 END) as bad_weights
            FROM voter
            """,
            [MAX_WEIGHT],
        )
        vote_events = db.fetchone("SELECT COUNT(*) FROM audit_event WHERE kind = ?", [VoteCast.kind])[0]

    if sentiment is None:
        issues.append("Sentiment state missing")
    else:
        stats["sentiment"] = int(sentiment[0])
        stats["last_update"] = int(sentiment[1])
        if not MIN_SENTIMENT <= sentiment[0] <= MAX_SENTIMENT:
            issues.append(f"Sentiment {sentiment[0]} outside [{MIN_SENTIMENT}, {MAX_SENTIMENT}]")

    stats["candidates"] = int(total_sum[1])
    stats["total_weight"] = int(total_sum[0])
    stats["voters"] = int(voter_check[0])
    stats["vote_events"] = int(vote_events)

    if int(total_sum[0]) != int(voter_check[1]):
        issues.append(f"Totals sum {total_sum[0]} != recorded voter weights {voter_check[1]}")

    if int(voter_check[0]) != vote_events:
        issues.append(f"{voter_check[0]} voters but {vote_events} VoteCast events")

    bad_weights = voter_check[2] or 0
    if bad_weights > 0:
        issues.append(f"{bad_weights} voters have weight outside [1, {MAX_WEIGHT}]")

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
