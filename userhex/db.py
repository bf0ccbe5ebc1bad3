"""SQL storage adapter for user accounts."""

from __future__ import annotations

import os
import sqlite3
from datetime import datetime

from userhex.domain import UserCredential, UserModel

QUERY_TIMEOUT = 9.0

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    firstname TEXT NOT NULL,
    lastname TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE,
    password_hash BLOB NOT NULL,
    activated INTEGER NOT NULL DEFAULT 0,
    version INTEGER NOT NULL DEFAULT 1,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


class DuplicateEmailError(Exception):
    """Raised when a user with the same e-mail address already exists."""


class NotFoundError(Exception):
    """Raised when no matching row exists."""


def open_connection() -> sqlite3.Connection:
    """Open the database named by the CONN_STR environment variable."""
    conn = sqlite3.connect(os.environ.get("CONN_STR", ""), timeout=QUERY_TIMEOUT)
    conn.executescript(_SCHEMA)
    return conn


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class Adapter:
    """Stores users in a SQL database connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def insert(self, user: UserModel) -> bool:
        """Insert ``user`` and fill in its id, version and creation time."""
        try:
            with self._conn:
                cur = self._conn.execute(
                    "INSERT INTO users(firstname, lastname, email, password_hash) "
                    "VALUES (?, ?, ?, ?)",
                    (user.first_name, user.last_name, user.email, user.password.hash),
                )
        except sqlite3.IntegrityError as exc:
            if "users.email" in str(exc):
                raise DuplicateEmailError("duplicate Email") from exc
            raise
        row = self._conn.execute(
            "SELECT id, version, created_at FROM users WHERE id = ?", (cur.lastrowid,)
        ).fetchone()
        user.id, user.version, created = row
        user.created_at = _parse_timestamp(created)
        return True

    def update(self, user: UserModel) -> tuple[int, int]:
        """Update ``user`` if its version is current; return id and new version."""
        with self._conn:
            cur = self._conn.execute(
                "UPDATE users SET firstname = ?, lastname = ?, email = ?, "
                "password_hash = ?, version = version + 1 "
                "WHERE id = ? AND version = ?",
                (
                    user.first_name,
                    user.last_name,
                    user.email,
                    user.password.hash,
                    user.id,
                    user.version,
                ),
            )
        if cur.rowcount == 0:
            raise NotFoundError("sql no rows")
        user.version += 1
        return user.id, user.version

    def delete(self, user_id: int) -> bool:
        """Delete the user with ``user_id``."""
        with self._conn:
            self._conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
        return True

    def validate_credential(self, credential: UserCredential) -> tuple[int, bool]:
        """Look up the credential's e-mail and check its password."""
        row = self._conn.execute(
            "SELECT id, password_hash, email FROM users WHERE email = ?",
            (credential.email,),
        ).fetchone()
        if row is None:
            raise NotFoundError("sql no rows")
        user_id, password_hash, _email = row
        valid = credential.compare(credential.password, password_hash)
        return user_id, valid