"""Tally repository - candidate totals, voters, and the setup marker."""

from loguru import logger

from app.models.ballot import BALLOT_ROW_ID, VoteCast
from app.repositories.base import BaseRepository


class TallyRepository(BaseRepository):
    """Repository for ballot state."""

    def is_initialized(self) -> bool:
        row = self.fetchone("SELECT COUNT(*) FROM ballot_state WHERE id = ?", [BALLOT_ROW_ID])
        return row[0] > 0

    def mark_initialized(self, now: int) -> None:
        self.execute(
            "INSERT INTO ballot_state (id, initialized_at) VALUES (?, ?)",
            [BALLOT_ROW_ID, now],
        )

    def create_candidates(self, candidates: list[str]) -> None:
        """Insert a zero total for each candidate."""
        for candidate in candidates:
            self.execute(
                "INSERT INTO candidate_total (candidate, total) VALUES (?, 0)",
                [candidate],
            )
        logger.debug("Created {} candidate totals", len(candidates))

    def get_total(self, candidate: str) -> int | None:
        """Total for a candidate, None if the candidate has no row."""
        row = self.fetchone("SELECT total FROM candidate_total WHERE candidate = ?", [candidate])
        return int(row[0]) if row else None

    def get_totals(self) -> dict[str, int]:
        """All totals: {candidate: total}."""
        rows = self.fetchall("SELECT candidate, total FROM candidate_total ORDER BY candidate")
        return {r[0]: int(r[1]) for r in rows}

    def add_weight(self, candidate: str, weight: int) -> None:
        self.execute(
            "UPDATE candidate_total SET total = total + ? WHERE candidate = ?",
            [weight, candidate],
        )

    def has_voted(self, voter_id: str) -> bool:
        row = self.fetchone("SELECT COUNT(*) FROM voter WHERE voter_id = ?", [voter_id])
        return row[0] > 0

    def record_voter(self, vote: VoteCast) -> None:
        """Mark the voter as having voted."""
        self.execute(
            """
            INSERT INTO voter (voter_id, candidate, weight, sentiment, voted_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            [vote.voter_id, vote.candidate, vote.weight, vote.sentiment, vote.at],
        )
