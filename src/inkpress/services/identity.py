"""Identifier generation for posts, comments and replies."""

from bson import ObjectId


def new_object_id() -> ObjectId:
    """Return a fresh BSON ObjectId."""
    return ObjectId()


def new_id() -> str:
    """Return a unique URL-safe identifier (24 lowercase hex characters)."""
    return str(new_object_id())
