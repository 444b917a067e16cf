"""Common models - base classes and shared tables."""

from app.models.common.audit import AUDIT_DDL, AuditRecord
from app.models.common.base import BaseEntity

__all__ = [
    "BaseEntity",
    "AUDIT_DDL",
    "AuditRecord",
]
