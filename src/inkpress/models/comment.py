# src/inkpress/models/comment.py
"""Comment and reply document models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def normalize(value: str) -> str:
    """Return the comparison key for an author or body value."""
    return value.strip().casefold()


class Reply(BaseModel):
    """A reader response to a comment. Collection name: "replies"."""

    id: str
    comment_id: str
    author: str
    body: str

    model_config = ConfigDict(extra="ignore")

    def to_document(self) -> dict[str, Any]:
        document = self.model_dump()
        document["author_key"] = normalize(self.author)
        document["body_key"] = normalize(self.body)
        return document


class Comment(BaseModel):
    """A top-level reader response to a post. Collection name: "comments".

    ``replies`` is filled in at read time from the replies collection.
    """

    id: str
    post_id: str
    author: str
    body: str
    replies: list[Reply] = Field(default_factory=list, exclude=True)

    model_config = ConfigDict(extra="ignore")

    def to_document(self) -> dict[str, Any]:
        document = self.model_dump()
        document["author_key"] = normalize(self.author)
        document["body_key"] = normalize(self.body)
        return document
