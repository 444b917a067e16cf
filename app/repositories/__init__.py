"""Repositories package - data access layer for the ledger database."""

from app.repositories.ballot import TallyRepository
from app.repositories.base import BaseRepository
from app.repositories.common import AuditRepository
from app.repositories.db import Database, init_tables
from app.repositories.sentiment import SentimentRepository

__all__ = [
    # DB
    "Database",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "AuditRepository",
    # Sentiment
    "SentimentRepository",
    # Ballot
    "TallyRepository",
]
