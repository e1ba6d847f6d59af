# blogstore

A small store for blog articles and their comments, kept in an SQLite
database file. It creates the tables it needs, keeps the `updated`
timestamp of changed rows current through triggers, and offers query
objects for adding, updating, listing, fetching and removing records.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
blogstore -d articles.db
```

`-d` (or `--datasource`) names the SQLite database file. The tables are
created if they do not exist yet. The command then prints the comments of
article 100, at most two of them, in the form
`[Comments{ArticleID: 100, Author: ...} ...]`. Without a data source, or
when the database cannot be opened or queried, it prints a message to
standard error and exits with status 1.

## Library use

```python
from blogstore.database import init_db, create_tables
from blogstore.models import Article, Comment
from blogstore.queries import ArticleQuery, CommentQuery

connection = init_db("articles.db")
create_tables(connection)

articles = ArticleQuery(connection)
comments = CommentQuery(connection)

article = Article(title="How to learn a language in 30 days?")
articles.add(article)  # fills in id, created and updated

comments.add(Comment(content="Very interesting post", article=article.id))
comments.add(Comment(content="Nicely done", article=article.id))

for item in articles.list_with_comments():
    print(item)

first_two = comments.filter(limit=2, offset=0, article_id=article.id)
```

### Modules

- `blogstore.database` — `init_db(datasource)` opens the database and
  checks that it answers, `ping(connection, datasource)` runs a trivial
  query, and `create_tables(connection)` creates the `articles` and
  `comments` tables and their timestamp triggers when missing.
- `blogstore.models` — the dataclasses `Article` and `Comment` (each with
  `to_dict()` for JSON output), and `ArticleRecord` and `CommentRecord`,
  raw table rows whose columns may all be `None`.
- `blogstore.queries` — `ArticleQuery` with `add`, `update`, `list`,
  `get_by_id`, `remove`, `list_with_comments` and `exists`;
  `CommentQuery` with `add`, `update`, `list(*article_ids)`, `get_by_id`,
  `remove`, `exists` and `filter(limit, offset, article_id)`. In
  `filter`, a zero argument means no restriction, and the result is a
  list of `CommentRecord`.
- `blogstore.schema` — descriptions of the `articles` and `comments`
  tables (`ARTICLES`, `COMMENTS`) with all, mutable and defaulted
  columns. A `Table` can be copied with an alias (`alias_as`), a schema
  (`from_schema`), a prefix (`with_prefix`) or a suffix (`with_suffix`),
  or as the `excluded` pseudo-table; `use_schema(schema)` moves both
  tables into one schema. `CommentQuery.filter` reads the table name from
  `COMMENTS`.
- `blogstore.cli` — the command above, and `json_response(stream, data)`,
  which writes data (articles, comments and datetimes included) as one
  line of JSON to a text stream.

### Errors

Operations on an article or comment that does not exist — including
adding a comment to a missing article — raise `NotFoundError`, a
subclass of `QueryError`; other query failures raise `QueryError`.
Failing to open, reach or set up the database raises `DatabaseError`.

## What it does not do

The command runs one fixed query and has no options for adding, editing
or listing records; that is done through the library. Updating an article
stores only its title and content, and updating a comment only its
content.