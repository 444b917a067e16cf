"""Audit event table - append-only log of ledger notifications."""

from dataclasses import dataclass

from app.models.common.base import BaseEntity

AUDIT_DDL = """
CREATE TABLE IF NOT EXISTS audit_event (
    seq BIGINT PRIMARY KEY,
    kind VARCHAR NOT NULL,
    payload JSON NOT NULL,
    recorded_at BIGINT NOT NULL
)
"""


@dataclass
class AuditRecord(BaseEntity):
    """Stored audit event."""

    seq: int
    kind: str
    payload: dict
    recorded_at: int
