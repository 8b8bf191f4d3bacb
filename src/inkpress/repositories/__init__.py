"""Data access layer over the MongoDB collections."""

from .comment_repo import CommentRepository
from .post_repo import PostRepository
from .subscriber_repo import SubscriberRepository

__all__ = ["CommentRepository", "PostRepository", "SubscriberRepository"]
