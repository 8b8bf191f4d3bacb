"""Form and view schemas."""

from .comment import CommentForm, ReplyForm
from .post import NewPostForm, PostView, to_post_view
from .subscriber import SubscribeForm

__all__ = [
    "CommentForm",
    "NewPostForm",
    "PostView",
    "ReplyForm",
    "SubscribeForm",
    "to_post_view",
]
