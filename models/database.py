"""SQLite database initialization and storage primitives."""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Iterator

from config.exceptions import DatabaseError
from models.chapter import Beat, Chapter
from models.novel import Novel, Part

logger = logging.getLogger(__name__)

# SQL for creating all tables.
# REFERENCES clauses are declarative only: foreign_keys stays OFF so a deleted
# part can leave chapters pointing at it.
_CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS novels (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    title TEXT NOT NULL,
    subtitle TEXT,
    genre TEXT,
    target_audience TEXT,
    status TEXT,
    logline TEXT,
    notes TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS novel_parts (
    id TEXT PRIMARY KEY,
    novel_id TEXT NOT NULL REFERENCES novels(id),
    order_index INTEGER NOT NULL,
    title TEXT,
    summary TEXT,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS novel_chapters (
    id TEXT PRIMARY KEY,
    novel_id TEXT NOT NULL REFERENCES novels(id),
    part_id TEXT REFERENCES novel_parts(id),
    order_index INTEGER NOT NULL,
    title TEXT,
    pov_character TEXT,
    summary TEXT,
    word_count_goal REAL,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS novel_beats (
    id TEXT PRIMARY KEY,
    novel_id TEXT NOT NULL REFERENCES novels(id),
    chapter_id TEXT REFERENCES novel_chapters(id),
    order_index INTEGER NOT NULL,
    beat_type TEXT,
    description TEXT NOT NULL,
    viewpoint TEXT,
    created_at TEXT NOT NULL
);
"""

# Allowed identifiers per table; anything else is rejected before reaching SQL
_TABLE_COLUMNS: dict[str, frozenset[str]] = {
    model.__table__: frozenset(model.columns())
    for model in (Novel, Part, Chapter, Beat)
}


def _adapt(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class Database:
    """SQLite store shared by every operation in the process.

    Exposes insert/select/update/delete with equality-conjunction predicates
    (keyword arguments). One connection is shared across threads and guarded
    by a re-entrant lock, so calls dispatched through ``asyncio.to_thread``
    are serialised.
    """

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.RLock()
        self._tx_depth = 0
        self._conn = self._connect()
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode = WAL")
        return conn

    def _init_db(self):
        with self._lock:
            self._conn.executescript(_CREATE_TABLES_SQL)
        logger.debug("Database ready at %s", self.db_path)

    def close(self):
        with self._lock:
            self._conn.close()

    # ---- Transactions ----

    @contextmanager
    def transaction(self) -> Iterator["Database"]:
        """Group several primitives into one commit.

        Nested blocks join the outermost one; an exception anywhere inside
        rolls back everything written since the outermost block began.
        """
        with self._lock:
            if self._tx_depth:
                self._tx_depth += 1
                try:
                    yield self
                finally:
                    self._tx_depth -= 1
                return

            self._tx_depth = 1
            try:
                with self._conn:
                    yield self
            finally:
                self._tx_depth = 0

    # ---- Primitives ----

    def insert(self, table: str, values: dict[str, Any]) -> sqlite3.Row:
        """Insert one row and return it as stored."""
        self._check(table, values)
        cols = list(values)
        sql = (
            f"INSERT INTO {table} ({', '.join(cols)}) "
            f"VALUES ({', '.join('?' for _ in cols)}) RETURNING *"
        )
        with self.transaction():
            return self._conn.execute(sql, [_adapt(values[c]) for c in cols]).fetchall()[0]

    def select(self, table: str, **where: Any) -> list[sqlite3.Row]:
        """Return every row matching all ``column=value`` predicates."""
        self._check(table, where)
        clause, params = self._where(where)
        with self._lock:
            return self._conn.execute(f"SELECT * FROM {table}{clause}", params).fetchall()

    def update(self, table: str, values: dict[str, Any], **where: Any) -> list[sqlite3.Row]:
        """Overwrite ``values`` on matching rows and return the updated rows."""
        if not values:
            raise DatabaseError("Update requires at least one column", {"table": table})
        self._check(table, values)
        self._check(table, where)
        cols = list(values)
        assignments = ", ".join(f"{c} = ?" for c in cols)
        clause, params = self._where(where)
        sql = f"UPDATE {table} SET {assignments}{clause} RETURNING *"
        with self.transaction():
            return self._conn.execute(sql, [_adapt(values[c]) for c in cols] + params).fetchall()

    def delete(self, table: str, **where: Any) -> int:
        """Delete matching rows and return how many were removed."""
        if not where:
            raise DatabaseError("Refusing to delete without a predicate", {"table": table})
        self._check(table, where)
        clause, params = self._where(where)
        with self.transaction():
            cursor = self._conn.execute(f"DELETE FROM {table}{clause}", params)
            return cursor.rowcount

    # ---- Helpers ----

    @staticmethod
    def _check(table: str, columns) -> None:
        allowed = _TABLE_COLUMNS.get(table)
        if allowed is None:
            raise DatabaseError(f"Unknown table: {table}")
        unknown = set(columns) - allowed
        if unknown:
            raise DatabaseError(
                f"Unknown column(s) for {table}: {', '.join(sorted(unknown))}",
                {"table": table},
            )

    @staticmethod
    def _where(where: dict[str, Any]) -> tuple[str, list[Any]]:
        if not where:
            return "", []
        parts, params = [], []
        for col, value in where.items():
            if value is None:
                parts.append(f"{col} IS NULL")
            else:
                parts.append(f"{col} = ?")
                params.append(_adapt(value))
        return " WHERE " + " AND ".join(parts), params
