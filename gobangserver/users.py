"""User account storage backed by SQLite."""

from __future__ import annotations

import logging
import sqlite3
import sys
import threading
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    uid INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT UNIQUE NOT NULL,
    password TEXT NOT NULL,
    level INTEGER NOT NULL DEFAULT 1
)
"""


@dataclass
class UserInfo:
    """A stored user account."""

    uid: int
    name: str
    password: str
    level: int


class DatabaseError(Exception):
    """Raised when the user database cannot be used."""


def default_db_path() -> Path:
    """Return ``data/users.db`` next to the running program."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    base = Path(script).resolve().parent if script else Path.cwd()
    return base / "data" / "users.db"


class UserDatabase:
    """SQLite-backed store of user accounts."""

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else default_db_path()
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.RLock()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> "UserDatabase":
        """Create the file and table if needed and connect."""
        if self._conn is not None:
            return self
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
        except OSError as exc:
            raise DatabaseError(f"cannot create database file {self.path}: {exc}") from exc
        try:
            conn = sqlite3.connect(self.path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {self.path}: {exc}") from exc
        try:
            conn.execute(_SCHEMA)
            conn.commit()
        except sqlite3.Error as exc:
            conn.close()
            raise DatabaseError(f"cannot create users table: {exc}") from exc
        self._conn = conn
        log.info("database ready at %s", self.path)
        return self

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def __enter__(self) -> "UserDatabase":
        return self.open()

    def __exit__(self, *args) -> None:
        self.close()

    def _require_open(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError("database is not open")
        return self._conn

    def user_exists(self, name: str) -> bool:
        """Tell whether a user with this name is stored."""
        with self._lock:
            conn = self._require_open()
            try:
                row = conn.execute(
                    "SELECT 1 FROM users WHERE name = ? LIMIT 1", (name,)
                ).fetchone()
            except sqlite3.Error as exc:
                raise DatabaseError(f"user lookup failed: {exc}") from exc
        return row is not None

    def add_user(self, name: str, password: str) -> bool:
        """Store a new user; return False if the name is already taken."""
        with self._lock:
            conn = self._require_open()
            if self.user_exists(name):
                return False
            try:
                with conn:
                    conn.execute(
                        "INSERT INTO users (name, password) VALUES (?, ?)",
                        (name, password),
                    )
            except sqlite3.Error as exc:
                raise DatabaseError(f"inserting user failed: {exc}") from exc
        log.info("added user %s", name)
        return True

    def get_user(self, name: str) -> UserInfo | None:
        """Return the stored user with this name, or None."""
        with self._lock:
            conn = self._require_open()
            try:
                row = conn.execute(
                    "SELECT uid, name, password, level FROM users WHERE name = ? LIMIT 1",
                    (name,),
                ).fetchone()
            except sqlite3.Error as exc:
                log.warning("user query failed: %s", exc)
                return None
        if row is None:
            return None
        uid, stored_name, stored_password, level = row
        return UserInfo(int(uid), str(stored_name), str(stored_password), int(level))