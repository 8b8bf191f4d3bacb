"""Data access helpers for working with posts."""
from __future__ import annotations

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from inkpress.db.session import Collections
from inkpress.models.post import Post

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post documents."""

    def __init__(self, db: Database) -> None:
        """Initialize the repository with a MongoDB database handle."""
        self.collection = db[Collections.POSTS]

    def get_by_id(self, post_id: str) -> Post | None:
        """Return a post by identifier."""
        document = self.collection.find_one({"id": post_id})
        if document is None:
            return None
        return Post.model_validate(document)

    def list_window(self, *, skip: int, limit: int) -> list[Post]:
        """Return posts newest first, skipping ``skip`` and returning at most ``limit``."""
        cursor = (
            self.collection.find({})
            .sort("published", DESCENDING)
            .skip(skip)
            .limit(limit)
        )
        return [Post.model_validate(document) for document in cursor]

    def create(self, post: Post) -> Post:
        """Insert a new post and return it.

        The document ``_id`` is the ObjectId the public identifier was derived from.
        """
        document = post.to_document()
        document["_id"] = ObjectId(post.id)
        self.collection.insert_one(document)
        return post

    def count(self) -> int:
        """Return the number of stored posts."""
        return self.collection.count_documents({})
