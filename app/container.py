"""Dependency Injection container - initialized at app startup."""

from app.repositories.ballot import TallyRepository
from app.repositories.common import AuditRepository
from app.repositories.db import Database
from app.repositories.sentiment import SentimentRepository
from app.services.auth import StaticAuthority
from app.services.ballot import WeightedBallot
from app.services.clock_source import SystemClock
from app.services.sentiment import SentimentClock
from settings import DB_PATH, OWNER_ID


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        db_path: str | None = None,
        clock=None,
        authority: StaticAuthority | None = None,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        self.clock = clock or SystemClock()
        self.authority = authority or StaticAuthority(OWNER_ID)
        self.db = Database(db_path or DB_PATH)

        # Repositories (share the one connection)
        self._sentiment_repo = SentimentRepository(self.db)
        self._tally_repo = TallyRepository(self.db)
        self.audit = AuditRepository(self.db)

        # Services (with injected repos)
        self.sentiment = SentimentClock(
            db=self.db,
            sentiment_repo=self._sentiment_repo,
            audit_repo=self.audit,
        )
        self.sentiment.create(self.clock.now())

        self.ballot = WeightedBallot(
            db=self.db,
            clock=self.sentiment,
            tally_repo=self._tally_repo,
            audit_repo=self.audit,
        )

        self._initialized = True

    def reset(self) -> None:
        """Close the database and forget all instances."""
        if not self._initialized:
            return
        self.db.close()
        self._initialized = False


# Global container instance
container = Container()
