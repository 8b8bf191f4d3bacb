"""Document models persisted in MongoDB."""

from .comment import Comment, Reply
from .post import Post
from .subscriber import Subscriber

__all__ = ["Comment", "Post", "Reply", "Subscriber"]
