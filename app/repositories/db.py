"""DuckDB connection and transaction management."""

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

MEMORY = ":memory:"


def db_exists(db_path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return db_path == MEMORY or Path(db_path).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if ledger tables already exist."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'sentiment_state'"
        ).fetchone()
        return result[0] > 0
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


class Database:
    """Single DuckDB connection behind one re-entrant lock.

    Every ledger operation runs inside ``transaction()``, which is the one
    exclusive critical section for sentiment and ballot state together.
    The outermost entry opens a DuckDB transaction and commits it on exit;
    any exception rolls everything back before propagating. Nested entries
    join the enclosing transaction. Callbacks registered with
    ``on_commit()`` run only after the outermost COMMIT and are dropped
    on rollback.
    """

    def __init__(self, db_path: str = DB_PATH):
        if not db_exists(db_path):
            logger.warning("DB not found: {}. Creating empty DB.", db_path)
        self.path = db_path
        self._conn: duckdb.DuckDBPyConnection | None = duckdb.connect(db_path)
        init_tables(self._conn)
        self._lock = threading.RLock()
        self._depth = 0
        self._pending: list[Callable[[], None]] = []
        logger.debug("DB connected: {}", db_path)

    @property
    def conn(self) -> duckdb.DuckDBPyConnection:
        if self._conn is None:
            raise RuntimeError("Database is closed")
        return self._conn

    @contextmanager
    def transaction(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Serialize and atomically commit everything run inside the block."""
        with self._lock:
            outermost = self._depth == 0
            if outermost:
                self.conn.execute("BEGIN TRANSACTION")
            self._depth += 1
            try:
                yield self.conn
            except BaseException:
                self._depth -= 1
                if outermost:
                    self._pending.clear()
                    self.conn.execute("ROLLBACK")
                    logger.debug("Transaction rolled back")
                raise
            self._depth -= 1
            if outermost:
                self.conn.execute("COMMIT")
                pending, self._pending = self._pending, []
                for callback in pending:
                    callback()

    def on_commit(self, callback: Callable[[], None]) -> None:
        """Run callback once the current transaction commits, or now if none is open."""
        with self._lock:
            if self._depth == 0:
                callback()
                return
            self._pending.append(callback)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query under the lock."""
        with self._lock:
            if params:
                return self.conn.execute(query, params)
            return self.conn.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        with self._lock:
            return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        with self._lock:
            return self.execute(query, params).fetchone()

    def close(self) -> None:
        """Close the connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("DB connection closed")
