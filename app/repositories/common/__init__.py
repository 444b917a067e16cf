"""Common repositories."""

from app.repositories.common.audit import AuditRepository

__all__ = ["AuditRepository"]
