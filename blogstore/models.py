"""Data objects for articles, comments and their raw table rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


def _timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _plain(value: Any) -> str:
    return "<nil>" if value is None else str(value)


@dataclass
class Comment:
    """A comment attached to an article."""

    id: int = 0
    content: str = ""
    author: str = ""
    article: int = 0
    created: datetime | None = None
    updated: datetime | None = None

    def __str__(self) -> str:
        return f"Comment{{Article: {self.article}, Author: {self.author}}}"

    def to_dict(self) -> dict[str, Any]:
        """Return the comment as a JSON-ready mapping."""
        return {
            "id": self.id,
            "Content": self.content,
            "author": self.author,
            "article": self.article,
            "created": _timestamp(self.created),
            "updated": _timestamp(self.updated),
        }


@dataclass
class Article:
    """A blog article together with its comments."""

    id: int = 0
    title: str = ""
    content: str = ""
    author: str = ""
    created: datetime | None = None
    updated: datetime | None = None
    comments: list[Comment] = field(default_factory=list)

    def __str__(self) -> str:
        comments = " ".join(str(comment) for comment in self.comments)
        return f"Article{{Title: {self.title}, Author: {self.author}, Comments: [{comments}]}}"

    def to_dict(self) -> dict[str, Any]:
        """Return the article, comments included, as a JSON-ready mapping."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "author": self.author,
            "created": _timestamp(self.created),
            "updated": _timestamp(self.updated),
            "comments": [comment.to_dict() for comment in self.comments],
        }


@dataclass
class ArticleRecord:
    """A raw row of the articles table; every column may be NULL."""

    id: int | None = None
    title: str | None = None
    content: str | None = None
    author: str | None = None
    created: datetime | None = None
    updated: datetime | None = None


@dataclass
class CommentRecord:
    """A raw row of the comments table; every column may be NULL."""

    id: int | None = None
    article_id: int | None = None
    content: str | None = None
    author: str | None = None
    created: datetime | None = None
    updated: datetime | None = None

    def __str__(self) -> str:
        return f"Comments{{ArticleID: {_plain(self.article_id)}, Author: {_plain(self.author)}}}"