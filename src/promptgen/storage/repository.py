# SQLite-backed store for prompts sent to the generation API.
# Narrow interface: create(record) and list_all(). Records are never
# updated or deleted by the tool.

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional

from ..errors import StorageError

_SCHEMA = """
CREATE TABLE IF NOT EXISTS prompts (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    prompt        TEXT    NOT NULL,
    content       TEXT    NOT NULL,
    actor         TEXT    NOT NULL,
    comments      INTEGER NOT NULL,
    documentation INTEGER NOT NULL,
    explanations  INTEGER NOT NULL
);
"""


@dataclass
class PromptRecord:
    """One stored request: the prompt as sent plus its modes."""
    prompt: str
    content: str
    actor: str
    comments: bool
    documentation: bool
    explanations: bool
    id: Optional[int] = None


class PromptRepository:
    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None

    # -------------------------
    # Connection / schema
    # -------------------------
    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            try:
                conn = sqlite3.connect(self.db_path.as_posix())
                conn.executescript(_SCHEMA)
            except sqlite3.Error as e:
                raise StorageError(f"Failed to open database {self.db_path}: {e}") from e
            self._conn = conn
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "PromptRepository":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # -------------------------
    # Operations
    # -------------------------
    def create(self, record: PromptRecord) -> PromptRecord:
        """Insert the record; returns a copy carrying the assigned id."""
        conn = self._get_conn()
        try:
            with conn:
                cur = conn.execute(
                    "INSERT INTO prompts(prompt, content, actor, comments, documentation, explanations) "
                    "VALUES (?, ?, ?, ?, ?, ?);",
                    (
                        record.prompt,
                        record.content,
                        record.actor,
                        int(record.comments),
                        int(record.documentation),
                        int(record.explanations),
                    ),
                )
        except sqlite3.Error as e:
            raise StorageError(f"Failed to insert prompt: {e}") from e
        return replace(record, id=cur.lastrowid)

    def list_all(self) -> List[PromptRecord]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT id, prompt, content, actor, comments, documentation, explanations "
                "FROM prompts ORDER BY id;"
            ).fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read prompts: {e}") from e
        return [
            PromptRecord(
                id=r[0],
                prompt=r[1],
                content=r[2],
                actor=r[3],
                comments=bool(r[4]),
                documentation=bool(r[5]),
                explanations=bool(r[6]),
            )
            for r in rows
        ]
