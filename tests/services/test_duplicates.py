"""Tests for duplicate comment/reply detection."""

from inkpress.models.comment import Comment, normalize
from inkpress.services.duplicates import is_duplicate


def _comment(author: str, body: str) -> Comment:
    return Comment(id="0" * 24, post_id="1" * 24, author=author, body=body)


def test_normalize_strips_and_casefolds() -> None:
    assert normalize("  Great POST \n") == "great post"


def test_exact_match_is_duplicate() -> None:
    assert is_duplicate([_comment("Alice", "Great post")], "Alice", "Great post")


def test_match_ignores_case_and_surrounding_whitespace() -> None:
    assert is_duplicate([_comment("Alice", "Great post")], " alice ", "GREAT POST")


def test_same_body_different_author_is_not_duplicate() -> None:
    assert not is_duplicate([_comment("Alice", "Great post")], "Bob", "Great post")


def test_inner_whitespace_is_significant() -> None:
    assert not is_duplicate([_comment("Alice", "Great post")], "Alice", "Great  post")


def test_empty_scope_is_never_duplicate() -> None:
    assert not is_duplicate([], "Alice", "Great post")
