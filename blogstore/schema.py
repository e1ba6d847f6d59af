"""Descriptions of the articles and comments tables for building queries."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class ColumnType(Enum):
    INTEGER = "integer"
    STRING = "string"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class Column:
    name: str
    type: ColumnType


@dataclass(frozen=True)
class Table:
    """A table with its columns, optional schema name and alias."""

    table_name: str
    all_columns: tuple[Column, ...]
    mutable_columns: tuple[Column, ...]
    default_columns: tuple[Column, ...]
    schema_name: str = ""
    alias: str = ""

    def alias_as(self, alias: str) -> Table:
        """Return a copy of the table with the given alias."""
        return replace(self, alias=alias)

    def from_schema(self, schema_name: str) -> Table:
        """Return a copy of the table in the given schema."""
        return replace(self, schema_name=schema_name)

    def with_prefix(self, prefix: str) -> Table:
        """Return a copy named prefix + name, aliased to the old name."""
        return replace(self, table_name=prefix + self.table_name, alias=self.table_name)

    def with_suffix(self, suffix: str) -> Table:
        """Return a copy named name + suffix, aliased to the old name."""
        return replace(self, table_name=self.table_name + suffix, alias=self.table_name)

    def excluded(self) -> Table:
        """Return the table as the 'excluded' pseudo-table of an upsert."""
        return replace(self, table_name="excluded", schema_name="", alias="")


def _make_table(name: str, *columns: Column) -> Table:
    defaults = tuple(c for c in columns if c.name in ("created", "updated"))
    return Table(
        table_name=name,
        all_columns=columns,
        mutable_columns=tuple(c for c in columns if c.name != "id"),
        default_columns=defaults,
    )


ARTICLES = _make_table(
    "articles",
    Column("id", ColumnType.INTEGER),
    Column("title", ColumnType.STRING),
    Column("content", ColumnType.STRING),
    Column("author", ColumnType.STRING),
    Column("created", ColumnType.TIMESTAMP),
    Column("updated", ColumnType.TIMESTAMP),
)

COMMENTS = _make_table(
    "comments",
    Column("id", ColumnType.INTEGER),
    Column("article_id", ColumnType.INTEGER),
    Column("content", ColumnType.STRING),
    Column("author", ColumnType.STRING),
    Column("created", ColumnType.TIMESTAMP),
    Column("updated", ColumnType.TIMESTAMP),
)


def use_schema(schema: str) -> None:
    """Move both tables into the given schema."""
    global ARTICLES, COMMENTS
    ARTICLES = ARTICLES.from_schema(schema)
    COMMENTS = COMMENTS.from_schema(schema)