from datetime import datetime

from blogstore.models import Article, ArticleRecord, Comment, CommentRecord


def test_comment_str():
    comment = Comment(article=3, author="bob")
    assert str(comment) == "Comment{Article: 3, Author: bob}"


def test_article_str_without_comments():
    article = Article(title="Hello", author="alice")
    assert str(article) == "Article{Title: Hello, Author: alice, Comments: []}"


def test_article_str_lists_comments():
    article = Article(
        title="Hello",
        author="alice",
        comments=[Comment(article=1, author="bob"), Comment(article=1, author="eve")],
    )
    text = str(article)
    assert text.startswith("Article{Title: Hello, Author: alice, Comments: [")
    assert "Comment{Article: 1, Author: bob} Comment{Article: 1, Author: eve}" in text


def test_comment_to_dict_keys_and_values():
    created = datetime(2024, 1, 2, 3, 4, 5)
    comment = Comment(id=7, content="Nicely done", author="bob", article=2, created=created)
    data = comment.to_dict()
    assert set(data) == {"id", "Content", "author", "article", "created", "updated"}
    assert data["Content"] == "Nicely done"
    assert data["article"] == 2
    assert datetime.fromisoformat(data["created"]) == created
    assert data["updated"] is None


def test_article_to_dict_nests_comments():
    article = Article(id=1, title="T", comments=[Comment(id=5, article=1)])
    data = article.to_dict()
    assert data["id"] == 1
    assert data["title"] == "T"
    assert data["comments"] == [Comment(id=5, article=1).to_dict()]


def test_article_default_comments_not_shared():
    first = Article()
    second = Article()
    first.comments.append(Comment())
    assert second.comments == []


def test_article_record_defaults_to_null_columns():
    record = ArticleRecord(title="x")
    assert record.title == "x"
    assert record.id is None
    assert record.content is None


def test_comment_record_str():
    record = CommentRecord(article_id=4, author="carol")
    assert str(record) == "Comments{ArticleID: 4, Author: carol}"


def test_comment_record_str_with_nulls():
    assert str(CommentRecord()) == "Comments{ArticleID: <nil>, Author: <nil>}"