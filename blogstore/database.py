"""Opening the SQLite database and creating its tables."""

from __future__ import annotations

import sqlite3

_PING_TIMEOUT = 5.0

_STAMP = "DATETIME DEFAULT CURRENT_TIMESTAMP"

_TABLES: dict[str, tuple[tuple[str, str], ...]] = {
    "articles": (
        ("id", "INTEGER PRIMARY KEY AUTOINCREMENT"),
        ("title", "VARCHAR(255)"),
        ("content", "TEXT NULL"),
        ("author", "VARCHAR(50) NULL"),
        ("created", _STAMP),
        ("updated", _STAMP),
    ),
    "comments": (
        ("id", "INTEGER PRIMARY KEY AUTOINCREMENT"),
        ("article_id", "INTEGER"),
        ("content", "TEXT NULL"),
        ("author", "VARCHAR(50) NULL"),
        ("created", _STAMP),
        ("updated", _STAMP),
    ),
}

_CONSTRAINTS: dict[str, tuple[str, ...]] = {
    "comments": ("FOREIGN KEY(article_id) REFERENCES articles(id) ON DELETE CASCADE",),
}


def _table_ddl(name: str) -> str:
    parts = [f"{column} {kind}" for column, kind in _TABLES[name]]
    parts.extend(_CONSTRAINTS.get(name, ()))
    return f"CREATE TABLE IF NOT EXISTS {name} ({', '.join(parts)});"


def _touch_trigger_ddl(name: str) -> str:
    """A trigger that refreshes the ``updated`` stamp of a changed row."""
    return (
        f"CREATE TRIGGER IF NOT EXISTS update_{name}_updated "
        f"AFTER UPDATE ON {name} "
        "WHEN old.updated <> CURRENT_TIMESTAMP "
        f"BEGIN UPDATE {name} SET updated = CURRENT_TIMESTAMP "
        "WHERE id = old.id; END;"
    )


def _schema_script() -> str:
    statements = [_table_ddl(name) for name in _TABLES]
    statements.extend(_touch_trigger_ddl(name) for name in _TABLES)
    return "\n".join(statements)


class DatabaseError(Exception):
    """Raised when the database cannot be opened, reached or migrated."""


def init_db(datasource: str) -> sqlite3.Connection:
    """Open the SQLite database at *datasource* and check that it answers."""
    try:
        connection = sqlite3.connect(
            datasource,
            timeout=_PING_TIMEOUT,
            isolation_level=None,
            check_same_thread=False,
        )
    except sqlite3.Error as exc:
        raise DatabaseError(f"Unable to use datasource {datasource}: {exc}") from exc

    try:
        ping(connection, datasource)
    except DatabaseError:
        connection.close()
        raise
    return connection


def ping(connection: sqlite3.Connection, datasource: str) -> None:
    """Check that *connection* can run a query."""
    try:
        connection.execute("SELECT 1").fetchone()
    except sqlite3.Error as exc:
        raise DatabaseError(f"Unable to use datasource {datasource}: {exc}") from exc


def create_tables(connection: sqlite3.Connection) -> None:
    """Create the articles and comments tables and their triggers if missing."""
    try:
        connection.executescript(_schema_script())
    except sqlite3.Error as exc:
        raise DatabaseError(f"Unable to create tables {exc}") from exc