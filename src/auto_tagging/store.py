"""
Persistence collaborator for tags, item-tag associations and consumed swipe
events.

`TagStore` is the interface the tagger and the feedback updater depend on.
`SQLiteTagStore` implements it on stdlib sqlite3. Its transactions use
BEGIN IMMEDIATE, which takes the write lock up front, so concurrent
read-modify-write cycles on the same association are serialized.

Schema:
  - tags(id PK, name UNIQUE, slug, kind, created_at)
  - item_tags(item_id, tag_id FK, confidence, source, updated_at,
              PRIMARY KEY(item_id, tag_id))
  - consumed_events(event_key PK, consumed_at)
"""
from __future__ import annotations

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional, Protocol

from .data_models import Association, AssociationSource, Tag, TagKind
from .errors import StoreError
from .file_utils import ensure_dir
from .text_utils import generate_slug

logger = logging.getLogger(__name__)


class TagStore(Protocol):
    def transaction(self): ...

    def find_or_create_tag(self, name: str, kind: TagKind = TagKind.EMERGENT) -> int: ...

    def get_tag_by_name(self, name: str) -> Optional[Tag]: ...

    def get_associations_for_item(self, item_id: str) -> List[Association]: ...

    def upsert_association(
        self, item_id: str, tag_id: int, confidence: float, source: AssociationSource
    ) -> None: ...

    def is_event_consumed(self, event_key: str) -> bool: ...

    def mark_event_consumed(self, event_key: str) -> None: ...


def connect_db(db_path: str, timeout: float = 30.0) -> sqlite3.Connection:
    if db_path != ":memory:":
        ensure_dir(os.path.dirname(db_path) or ".")
    # Autocommit mode; transactions are opened explicitly with BEGIN IMMEDIATE
    conn = sqlite3.connect(db_path, timeout=timeout, isolation_level=None)
    conn.execute("PRAGMA foreign_keys = ON;")
    if db_path != ":memory:":
        conn.execute("PRAGMA journal_mode = WAL;")
    conn.execute("PRAGMA synchronous = NORMAL;")
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS tags (
            id          INTEGER PRIMARY KEY AUTOINCREMENT,
            name        TEXT NOT NULL UNIQUE,
            slug        TEXT,
            kind        TEXT NOT NULL DEFAULT 'emergent',
            created_at  TEXT DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now'))
        );
        """
    )
    # confidence is nullable for rows written by older clients; readers treat
    # NULL as the neutral midpoint
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS item_tags (
            item_id     TEXT NOT NULL,
            tag_id      INTEGER NOT NULL,
            confidence  REAL,
            source      TEXT NOT NULL DEFAULT 'auto',
            updated_at  TEXT DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now')),
            PRIMARY KEY (item_id, tag_id),
            FOREIGN KEY (tag_id) REFERENCES tags(id) ON DELETE CASCADE
        );
        """
    )
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS consumed_events (
            event_key   TEXT PRIMARY KEY,
            consumed_at TEXT DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now'))
        );
        """
    )
    conn.execute("CREATE INDEX IF NOT EXISTS idx_item_tags_tag ON item_tags(tag_id);")


class SQLiteTagStore:
    def __init__(self, db_path: str = ":memory:", timeout: float = 30.0):
        try:
            self.conn = connect_db(db_path, timeout=timeout)
            init_schema(self.conn)
        except sqlite3.Error as e:
            raise StoreError(f"cannot open tag store at {db_path!r}: {e}") from e
        self.db_path = db_path
        self._depth = 0

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "SQLiteTagStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @contextmanager
    def transaction(self) -> Iterator["SQLiteTagStore"]:
        """
        Run the enclosed reads and writes as one IMMEDIATE transaction.
        Nested calls join the outer transaction. Any error rolls back and
        surfaces as StoreError.
        """
        if self._depth > 0:
            self._depth += 1
            try:
                yield self
            finally:
                self._depth -= 1
            return

        try:
            self.conn.execute("BEGIN IMMEDIATE")
        except sqlite3.Error as e:
            raise StoreError(f"cannot begin transaction: {e}") from e
        self._depth = 1
        try:
            yield self
            self.conn.execute("COMMIT")
        except BaseException as e:
            try:
                self.conn.execute("ROLLBACK")
            except sqlite3.Error:
                logger.warning("rollback failed", exc_info=True)
            if isinstance(e, sqlite3.Error):
                raise StoreError(str(e)) from e
            raise
        finally:
            self._depth = 0

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        try:
            return self.conn.execute(sql, params)
        except sqlite3.Error as e:
            raise StoreError(f"{e} (sql: {sql.split()[0]})") from e

    def find_or_create_tag(self, name: str, kind: TagKind = TagKind.EMERGENT) -> int:
        with self.transaction():
            self._execute(
                "INSERT INTO tags (name, slug, kind) VALUES (?, ?, ?) ON CONFLICT(name) DO NOTHING",
                (name, generate_slug(name), TagKind(kind).value),
            )
            row = self._execute("SELECT id FROM tags WHERE name = ?", (name,)).fetchone()
        return int(row[0])

    def get_tag_by_name(self, name: str) -> Optional[Tag]:
        row = self._execute(
            "SELECT id, name, slug, kind FROM tags WHERE name = ?", (name,)
        ).fetchone()
        if row is None:
            return None
        return Tag(id=int(row[0]), name=row[1], slug=row[2], kind=TagKind(row[3]))

    def get_associations_for_item(self, item_id: str) -> List[Association]:
        rows = self._execute(
            "SELECT item_id, tag_id, confidence, source FROM item_tags WHERE item_id = ? ORDER BY tag_id",
            (item_id,),
        ).fetchall()
        return [
            Association(item_id=r[0], tag_id=int(r[1]), confidence=r[2], source=AssociationSource(r[3]))
            for r in rows
        ]

    def upsert_association(
        self,
        item_id: str,
        tag_id: int,
        confidence: float,
        source: AssociationSource = AssociationSource.AUTO,
    ) -> None:
        self._execute(
            """
            INSERT INTO item_tags (item_id, tag_id, confidence, source)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(item_id, tag_id) DO UPDATE SET
                confidence = excluded.confidence,
                source     = excluded.source,
                updated_at = strftime('%Y-%m-%dT%H:%M:%SZ','now')
            """,
            (item_id, int(tag_id), float(confidence), AssociationSource(source).value),
        )

    def is_event_consumed(self, event_key: str) -> bool:
        row = self._execute("SELECT 1 FROM consumed_events WHERE event_key = ?", (event_key,)).fetchone()
        return row is not None

    def mark_event_consumed(self, event_key: str) -> None:
        self._execute("INSERT OR IGNORE INTO consumed_events (event_key) VALUES (?)", (event_key,))
