"""Duplicate comment and reply detection."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from inkpress.models.comment import normalize


class Authored(Protocol):
    author: str
    body: str


def is_duplicate(existing_items: Iterable[Authored], new_author: str, new_body: str) -> bool:
    """Return True if any existing item has the same normalized author and body.

    Normalization strips surrounding whitespace and case-folds.
    """
    author_key = normalize(new_author)
    body_key = normalize(new_body)
    return any(
        normalize(item.author) == author_key and normalize(item.body) == body_key
        for item in existing_items
    )
