"""Todo records and the queries that store them in SQLite."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from datetime import datetime

_NO_ROWS = "no rows in result set"
_COLUMNS = "id, title, description, completed, created_at, updated_at"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT,
    completed INTEGER,
    created_at TEXT,
    updated_at TEXT
)
"""


@dataclass(frozen=True)
class Todo:
    """A stored todo row; nullable columns are ``None`` when unset."""

    id: int
    title: str
    description: str | None = None
    completed: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class CreateTodoParams:
    title: str
    description: str | None = None
    completed: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateTodoParams:
    id: int
    title: str
    description: str | None = None
    completed: bool | None = None
    updated_at: datetime | None = None


def _bool_to_db(value: bool | None) -> int | None:
    return None if value is None else int(value)


def _time_to_db(value: datetime | None) -> str | None:
    return None if value is None else value.isoformat(sep=" ")


def _time_from_db(value: str | None) -> datetime | None:
    return None if value is None else datetime.fromisoformat(value)


def _scan(row: tuple) -> Todo:
    todo_id, title, description, completed, created_at, updated_at = row
    return Todo(
        id=todo_id,
        title=title,
        description=description,
        completed=None if completed is None else bool(completed),
        created_at=_time_from_db(created_at),
        updated_at=_time_from_db(updated_at),
    )


class Queries:
    """Todo queries over one SQLite connection, safe to share between threads."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self._db = db
        self._lock = threading.RLock()

    def _fetch_one(self, todo_id: int) -> Todo:
        row = self._db.execute(
            f"SELECT {_COLUMNS} FROM todos WHERE id = ? LIMIT 1", (todo_id,)
        ).fetchone()
        if row is None:
            raise LookupError(_NO_ROWS)
        return _scan(row)

    def create_todo(self, arg: CreateTodoParams) -> Todo:
        """Insert a todo and return the stored row."""
        with self._lock, self._db:
            cursor = self._db.execute(
                "INSERT INTO todos (title, description, completed, created_at, updated_at) "
                "VALUES (?, ?, ?, ?, ?)",
                (
                    arg.title,
                    arg.description,
                    _bool_to_db(arg.completed),
                    _time_to_db(arg.created_at),
                    _time_to_db(arg.updated_at),
                ),
            )
            return self._fetch_one(cursor.lastrowid)

    def delete_todo(self, todo_id: int) -> None:
        """Delete a todo; deleting an id that does not exist is not an error."""
        with self._lock, self._db:
            self._db.execute("DELETE FROM todos WHERE id = ?", (todo_id,))

    def get_todo(self, todo_id: int) -> Todo:
        """Return one todo, raising ``LookupError`` when it does not exist."""
        with self._lock:
            return self._fetch_one(todo_id)

    def get_todos(self) -> list[Todo]:
        """Return every todo ordered by id."""
        with self._lock:
            rows = self._db.execute(f"SELECT {_COLUMNS} FROM todos ORDER BY id ASC").fetchall()
        return [_scan(row) for row in rows]

    def update_todo(self, arg: UpdateTodoParams) -> Todo:
        """Update a todo and return the stored row, raising ``LookupError`` if absent."""
        with self._lock, self._db:
            cursor = self._db.execute(
                "UPDATE todos SET title = ?, description = ?, completed = ?, updated_at = ? "
                "WHERE id = ?",
                (
                    arg.title,
                    arg.description,
                    _bool_to_db(arg.completed),
                    _time_to_db(arg.updated_at),
                    arg.id,
                ),
            )
            if cursor.rowcount == 0:
                raise LookupError(_NO_ROWS)
            return self._fetch_one(arg.id)


def ensure_schema(db: sqlite3.Connection) -> None:
    """Create the ``todos`` table if it does not exist yet."""
    with db:
        db.execute(_SCHEMA)


def _database_path(uri: str) -> str:
    if not uri:
        raise ValueError("Unable to parse DB_URI: it is empty")
    if uri.startswith("sqlite://"):
        path = uri[len("sqlite://"):]
        if path.startswith("/"):
            path = path[1:]
        return path or ":memory:"
    if "://" in uri:
        scheme = uri.split("://", 1)[0]
        raise ValueError(f"Unable to parse DB_URI: unsupported scheme {scheme!r}")
    return uri


def new_store(uri: str) -> Queries:
    """Open the SQLite database named by ``uri`` and return a store over it.

    ``uri`` is ``sqlite:///path``, ``sqlite://`` (in memory) or a plain path.
    """
    db = sqlite3.connect(_database_path(uri), check_same_thread=False)
    ensure_schema(db)
    return Queries(db)