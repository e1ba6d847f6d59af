import pytest

from blogstore import schema
from blogstore.schema import ColumnType


@pytest.fixture
def reset_schema():
    yield
    schema.use_schema("")


def _names(columns):
    return [column.name for column in columns]


def test_articles_columns():
    table = schema.ARTICLES.alias_as("a")
    assert _names(table.all_columns) == ["id", "title", "content", "author", "created", "updated"]
    assert _names(table.mutable_columns) == ["title", "content", "author", "created", "updated"]
    assert _names(table.default_columns) == ["created", "updated"]


def test_comments_columns():
    table = schema.COMMENTS.from_schema("main")
    assert _names(table.all_columns) == ["id", "article_id", "content", "author", "created", "updated"]
    assert "id" not in _names(table.mutable_columns)
    assert table.all_columns[1].type is ColumnType.INTEGER


def test_alias_as_keeps_name():
    aliased = schema.ARTICLES.alias_as("a")
    assert aliased.alias == "a"
    assert aliased.table_name == "articles"
    assert schema.ARTICLES.alias == ""


def test_from_schema_keeps_alias():
    table = schema.COMMENTS.alias_as("c").from_schema("main")
    assert table.schema_name == "main"
    assert table.alias == "c"
    assert table.table_name == "comments"


def test_with_prefix_aliases_old_name():
    table = schema.ARTICLES.with_prefix("pre_")
    assert table.table_name == "pre_articles"
    assert table.alias == "articles"


def test_with_suffix_aliases_old_name():
    table = schema.COMMENTS.with_suffix("_old")
    assert table.table_name == "comments_old"
    assert table.alias == "comments"
    assert table.all_columns == schema.COMMENTS.all_columns


def test_excluded_table():
    excluded = schema.ARTICLES.from_schema("main").alias_as("a").excluded()
    assert excluded.table_name == "excluded"
    assert excluded.schema_name == ""
    assert excluded.alias == ""
    assert excluded.all_columns == schema.ARTICLES.all_columns


def test_use_schema_moves_both_tables(reset_schema):
    schema.use_schema("blog")
    articles = schema.ARTICLES.alias_as("a")
    comments = schema.COMMENTS.with_suffix("_old")
    assert articles.schema_name == "blog"
    assert articles.table_name == "articles"
    assert comments.schema_name == "blog"
    assert comments.table_name == "comments_old"