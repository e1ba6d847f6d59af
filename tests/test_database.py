import pytest

from blogstore.database import DatabaseError, create_tables, init_db, ping


@pytest.fixture
def connection():
    conn = init_db(":memory:")
    yield conn
    conn.close()


def _names(conn, kind):
    rows = conn.execute("SELECT name FROM sqlite_master WHERE type = ?", (kind,)).fetchall()
    return {row[0] for row in rows}


def test_init_db_returns_working_connection(connection):
    assert connection.execute("SELECT 1").fetchone() == (1,)


def test_init_db_on_file(tmp_path):
    path = tmp_path / "articles.db"
    conn = init_db(str(path))
    try:
        create_tables(conn)
    finally:
        conn.close()
    assert path.exists()


def test_init_db_fails_on_directory(tmp_path):
    with pytest.raises(DatabaseError, match="Unable to use datasource"):
        init_db(str(tmp_path))


def test_ping_closed_connection_raises():
    conn = init_db(":memory:")
    conn.close()
    with pytest.raises(DatabaseError, match="mem-source"):
        ping(conn, "mem-source")


def test_create_tables_creates_tables_and_triggers(connection):
    create_tables(connection)
    assert {"articles", "comments"} <= _names(connection, "table")
    assert _names(connection, "trigger") == {"update_articles_updated", "update_comments_updated"}


def test_create_tables_is_idempotent(connection):
    create_tables(connection)
    create_tables(connection)
    assert {"articles", "comments"} <= _names(connection, "table")


def test_create_tables_closed_connection_raises():
    conn = init_db(":memory:")
    conn.close()
    with pytest.raises(DatabaseError, match="Unable to create tables"):
        create_tables(conn)


def test_defaults_fill_timestamps(connection):
    create_tables(connection)
    row = connection.execute(
        "INSERT INTO articles(title) VALUES (?) RETURNING id, created, updated", ("T",)
    ).fetchone()
    assert row[0] == 1
    assert row[1] is not None and row[1] == row[2]


def test_update_trigger_refreshes_timestamp(connection):
    create_tables(connection)
    old = "2000-01-01 00:00:00"
    connection.execute("INSERT INTO articles(title, updated) VALUES (?, ?)", ("T", old))
    connection.execute("UPDATE articles SET title = ? WHERE id = 1", ("U",))
    title, updated = connection.execute("SELECT title, updated FROM articles WHERE id = 1").fetchone()
    assert title == "U"
    assert updated > old


def test_comment_update_trigger_refreshes_timestamp(connection):
    create_tables(connection)
    old = "2000-01-01 00:00:00"
    connection.execute("INSERT INTO comments(article_id, content, updated) VALUES (1, 'c', ?)", (old,))
    connection.execute("UPDATE comments SET content = 'd' WHERE id = 1")
    content, updated = connection.execute("SELECT content, updated FROM comments WHERE id = 1").fetchone()
    assert content == "d"
    assert updated > old