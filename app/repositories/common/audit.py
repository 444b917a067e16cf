"""Audit repository - append-only event log."""

import json

from loguru import logger

from app.models.common import AuditRecord, BaseEntity
from app.repositories.base import BaseRepository


class AuditRepository(BaseRepository):
    """Stores ledger notifications next to the state they describe."""

    def record(self, event: BaseEntity, now: int) -> int:
        """Append an event; returns its sequence number."""
        row = self.fetchone("SELECT COALESCE(MAX(seq), 0) + 1 FROM audit_event")
        seq = int(row[0])
        payload = event.to_json()
        self.execute(
            "INSERT INTO audit_event (seq, kind, payload, recorded_at) VALUES (?, ?, ?, ?)",
            [seq, event.kind, payload, now],
        )
        self._db.on_commit(lambda: logger.bind(audit=True, kind=event.kind).info(payload))
        return seq

    def events(self, kind: str | None = None) -> list[AuditRecord]:
        """List events in order, optionally of one kind."""
        if kind:
            rows = self.fetchall(
                "SELECT seq, kind, payload, recorded_at FROM audit_event WHERE kind = ? ORDER BY seq",
                [kind],
            )
        else:
            rows = self.fetchall("SELECT seq, kind, payload, recorded_at FROM audit_event ORDER BY seq")

        return [
            AuditRecord(seq=int(r[0]), kind=r[1], payload=json.loads(r[2]), recorded_at=int(r[3]))
            for r in rows
        ]

    def count(self, kind: str | None = None) -> int:
        if kind:
            row = self.fetchone("SELECT COUNT(*) FROM audit_event WHERE kind = ?", [kind])
        else:
            row = self.fetchone("SELECT COUNT(*) FROM audit_event")
        return row[0]
