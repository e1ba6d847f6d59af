"""Queries over the articles and comments tables."""

from __future__ import annotations

import sqlite3
from collections import defaultdict
from datetime import datetime
from typing import Any

from blogstore import schema
from blogstore.models import Article, Comment, CommentRecord


class QueryError(Exception):
    """Raised when a query against the database fails."""


class NotFoundError(QueryError):
    """Raised when the article or comment a query targets does not exist."""


def _parse_time(value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _article_from_row(row: tuple) -> Article:
    article_id, title, content, author, created, updated = row
    return Article(
        id=article_id,
        title=title or "",
        content=content or "",
        author=author or "",
        created=_parse_time(created),
        updated=_parse_time(updated),
    )


def _comment_from_row(row: tuple) -> Comment:
    comment_id, content, author, article_id, created, updated = row
    return Comment(
        id=comment_id,
        content=content or "",
        author=author or "",
        article=article_id or 0,
        created=_parse_time(created),
        updated=_parse_time(updated),
    )


def _table_expression(table: schema.Table) -> str:
    name = f"{table.schema_name}.{table.table_name}" if table.schema_name else table.table_name
    return f"{name} AS {table.alias}" if table.alias else name


class ArticleQuery:
    """Create, read, update and delete articles."""

    _COLUMNS = "id, title, content, author, created, updated"

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._comments: CommentQuery | None = None

    @property
    def comments(self) -> CommentQuery:
        """The comment queries sharing this connection."""
        if self._comments is None:
            self._comments = CommentQuery(self._connection)
        return self._comments

    def _stamp(self, article: Article, action: str) -> None:
        row = self._connection.execute(
            "SELECT id, created, updated FROM articles WHERE id = ?", (article.id,)
        ).fetchone()
        if row is None:
            raise QueryError(f"Unable to {action} article: no row returned")
        article.id, article.created, article.updated = row[0], _parse_time(row[1]), _parse_time(row[2])

    def add(self, article: Article) -> Article:
        """Insert *article*, filling in its id and timestamps."""
        try:
            cursor = self._connection.execute(
                "INSERT INTO articles(title, content, author) VALUES (?, ?, ?)",
                (article.title, article.content, article.author),
            )
            article.id = cursor.lastrowid
            self._stamp(article, "add")
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to add article: {exc}") from exc
        return article

    def update(self, article: Article) -> Article:
        """Store the title and content of an existing article."""
        if not self.exists(article.id):
            raise NotFoundError(f"Unable to update: the article {article.id} does not exist")
        try:
            self._connection.execute(
                "UPDATE articles SET title = ?, content = ? WHERE id = ?",
                (article.title, article.content, article.id),
            )
            self._stamp(article, "update")
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to update article: {exc}") from exc
        return article

    def list(self) -> list[Article]:
        """Return every article, without comments."""
        try:
            rows = self._connection.execute(f"SELECT {self._COLUMNS} FROM articles").fetchall()
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to list articles: {exc}") from exc
        return [_article_from_row(row) for row in rows]

    def get_by_id(self, article_id: int) -> Article:
        """Return the article with the given id."""
        if not self.exists(article_id):
            raise NotFoundError(f"Unable to retrieve: the article {article_id} does not exist")
        try:
            row = self._connection.execute(
                f"SELECT {self._COLUMNS} FROM articles WHERE id = ?", (article_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to retrieve article: {exc}") from exc
        if row is None:
            raise NotFoundError(f"Unable to retrieve: the article {article_id} does not exist")
        return _article_from_row(row)

    def remove(self, article_id: int) -> None:
        """Delete the article with the given id."""
        if not self.exists(article_id):
            raise NotFoundError(f"Unable to remove: the article {article_id} does not exist")
        try:
            self._connection.execute("DELETE FROM articles WHERE id = ?", (article_id,))
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to remove article: {exc}") from exc

    def list_with_comments(self) -> list[Article]:
        """Return every article with its comments attached."""
        articles = self.list()
        if not articles:
            return articles
        grouped: dict[int, list[Comment]] = defaultdict(list)
        for comment in self.comments.list(*(article.id for article in articles)):
            grouped[comment.article].append(comment)
        for article in articles:
            article.comments.extend(grouped.get(article.id, []))
        return articles

    def exists(self, article_id: int) -> bool:
        """Tell whether an article with the given id exists."""
        try:
            row = self._connection.execute(
                "SELECT EXISTS(SELECT 1 FROM articles WHERE id = ?)", (article_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to check article {article_id}: {exc}") from exc
        return bool(row[0])


class CommentQuery:
    """Create, read, update and delete comments."""

    _COLUMNS = "id, content, author, article_id, created, updated"

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._articles: ArticleQuery | None = None

    @property
    def articles(self) -> ArticleQuery:
        """The article queries sharing this connection."""
        if self._articles is None:
            self._articles = ArticleQuery(self._connection)
            self._articles._comments = self
        return self._articles

    def _stamp(self, comment: Comment, action: str) -> None:
        row = self._connection.execute(
            "SELECT id, created, updated FROM comments WHERE id = ?", (comment.id,)
        ).fetchone()
        if row is None:
            raise QueryError(f"Unable to {action} comment: no row returned")
        comment.id, comment.created, comment.updated = row[0], _parse_time(row[1]), _parse_time(row[2])

    def add(self, comment: Comment) -> Comment:
        """Insert *comment* on an existing article, filling in id and timestamps."""
        if not self.articles.exists(comment.article):
            raise NotFoundError(f"Unable to add: the article {comment.article} does not exist")
        try:
            cursor = self._connection.execute(
                "INSERT INTO comments(content, author, article_id) VALUES (?, ?, ?)",
                (comment.content, comment.author, comment.article),
            )
            comment.id = cursor.lastrowid
            self._stamp(comment, "add")
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to add comment: {exc}") from exc
        return comment

    def update(self, comment: Comment) -> Comment:
        """Store the content of an existing comment."""
        if not self.exists(comment.id):
            raise NotFoundError(f"Unable to update: the comment {comment.id} does not exist")
        try:
            self._connection.execute(
                "UPDATE comments SET content = ? WHERE id = ?", (comment.content, comment.id)
            )
            self._stamp(comment, "update")
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to update comment: {exc}") from exc
        return comment

    def list(self, *args: int) -> list[Comment]:
        """Return comments, only those of the given article ids if any are given."""
        query = f"SELECT {self._COLUMNS} FROM comments"
        if args:
            query += f" WHERE article_id IN ({', '.join('?' for _ in args)})"
        try:
            rows = self._connection.execute(query, args).fetchall()
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to list comments: {exc}") from exc
        return [_comment_from_row(row) for row in rows]

    def get_by_id(self, comment_id: int) -> Comment:
        """Return the comment with the given id."""
        if not self.exists(comment_id):
            raise NotFoundError(f"Unable to retrieve: the comment {comment_id} does not exist")
        try:
            row = self._connection.execute(
                f"SELECT {self._COLUMNS} FROM comments WHERE id = ?", (comment_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to retrieve comment: {exc}") from exc
        if row is None:
            raise NotFoundError(f"Unable to retrieve: the comment {comment_id} does not exist")
        return _comment_from_row(row)

    def remove(self, comment_id: int) -> None:
        """Delete the comment with the given id."""
        if not self.exists(comment_id):
            raise NotFoundError(f"Unable to remove: the comment {comment_id} does not exist")
        try:
            self._connection.execute("DELETE FROM comments WHERE id = ?", (comment_id,))
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to remove comment: {exc}") from exc

    def exists(self, comment_id: int) -> bool:
        """Tell whether a comment with the given id exists."""
        try:
            row = self._connection.execute(
                "SELECT EXISTS(SELECT 1 FROM comments WHERE id = ?)", (comment_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to check comment {comment_id}: {exc}") from exc
        return bool(row[0])

    def filter(self, limit: int = 0, offset: int = 0, article_id: int = 0) -> list[CommentRecord]:
        """Return raw comment rows; a zero argument means no restriction."""
        table = schema.COMMENTS
        columns = ", ".join(column.name for column in table.all_columns)
        query = f"SELECT {columns} FROM {_table_expression(table)}"
        params: list[int] = []
        if article_id:
            query += " WHERE article_id = ?"
            params.append(article_id)
        if limit or offset:
            query += " LIMIT ?"
            params.append(limit if limit else -1)
        if offset:
            query += " OFFSET ?"
            params.append(offset)
        try:
            cursor = self._connection.execute(query, params)
            names = [description[0] for description in cursor.description]
            rows = cursor.fetchall()
        except sqlite3.Error as exc:
            raise QueryError(f"Unable to filter comments: {exc}") from exc

        records = []
        for row in rows:
            values = dict(zip(names, row))
            values["created"] = _parse_time(values.get("created"))
            values["updated"] = _parse_time(values.get("updated"))
            records.append(CommentRecord(**values))
        return records