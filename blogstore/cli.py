"""Command line entry point for the blog store."""

from __future__ import annotations

import argparse
import json
import sys
from contextlib import closing
from datetime import datetime
from typing import Any, TextIO

from blogstore.database import DatabaseError, create_tables, init_db
from blogstore.queries import CommentQuery, QueryError


def _encode(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def json_response(stream: TextIO, data: Any) -> None:
    """Write *data* to *stream* as one line of JSON."""
    stream.write(json.dumps(data, default=_encode) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Open the database, create its tables and print a filtered list of comments."""
    parser = argparse.ArgumentParser(prog="blogstore", description="Blog articles and comments in SQLite.")
    parser.add_argument("-d", "--datasource", default="", help="SQLite datasource")
    args = parser.parse_args(argv)

    if not args.datasource:
        print("blogstore: a datasource is required (-d PATH)", file=sys.stderr)
        return 1

    try:
        connection = init_db(args.datasource)
    except DatabaseError as exc:
        print(f"blogstore: {exc}", file=sys.stderr)
        return 1

    with closing(connection):
        try:
            create_tables(connection)
        except DatabaseError as exc:
            print(f"blogstore: {exc}", file=sys.stderr)
            return 1
        try:
            results = CommentQuery(connection).filter(limit=2, article_id=100)
        except QueryError:
            print("blogstore: cannot return a result", file=sys.stderr)
            return 1

    print("[" + " ".join(str(record) for record in results) + "]")
    return 0


if __name__ == "__main__":
    sys.exit(main())