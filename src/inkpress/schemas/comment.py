# src/inkpress/schemas/comment.py
"""Comment and reply form schemas."""

from pydantic import BaseModel


class CommentForm(BaseModel):
    """Fields of the comment form on a post page."""

    commentor: str = ""
    comment: str = ""


class ReplyForm(BaseModel):
    """Fields of the reply form on a comment page."""

    replier: str = ""
    reply: str = ""
