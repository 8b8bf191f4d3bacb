"""MongoDB client configuration."""

from __future__ import annotations

import logging
from functools import lru_cache

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database

from inkpress.core.settings import settings

logger = logging.getLogger(__name__)


class Collections:
    """Collection names used by the blog."""

    POSTS = "posts"
    COMMENTS = "comments"
    REPLIES = "replies"
    SUBSCRIBERS = "subscribers"


@lru_cache(maxsize=1)
def get_client() -> MongoClient:
    """Return the process-wide MongoDB client."""
    return MongoClient(settings.database_url)


def get_db() -> Database:
    """Return the configured database for dependency injection."""
    return get_client()[settings.database_name]


def ensure_indexes(db: Database) -> None:
    """Create the indexes the repositories rely on.

    The comment and reply indexes on the normalized author/body keys make the
    duplicate check atomic with the insert.
    """
    db[Collections.POSTS].create_index([("id", ASCENDING)], unique=True)
    db[Collections.POSTS].create_index([("published", DESCENDING)])
    db[Collections.COMMENTS].create_index([("id", ASCENDING)], unique=True)
    db[Collections.COMMENTS].create_index(
        [("post_id", ASCENDING), ("author_key", ASCENDING), ("body_key", ASCENDING)],
        unique=True,
    )
    db[Collections.REPLIES].create_index([("id", ASCENDING)], unique=True)
    db[Collections.REPLIES].create_index(
        [("comment_id", ASCENDING), ("author_key", ASCENDING), ("body_key", ASCENDING)],
        unique=True,
    )
    db[Collections.SUBSCRIBERS].create_index([("mail", ASCENDING)], unique=True)
    logger.debug("Ensured indexes on %s", db.name)
