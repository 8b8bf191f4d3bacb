"""Data access helpers for comments and replies."""
from __future__ import annotations

from bson import ObjectId
from pymongo.database import Database

from inkpress.db.session import Collections
from inkpress.models.comment import Comment, Reply

__all__ = ["CommentRepository"]


class CommentRepository:
    """Access to the comments and replies collections.

    Comments and replies are stored as independent documents and assembled
    into a tree only when read.
    """

    def __init__(self, db: Database) -> None:
        self.comments = db[Collections.COMMENTS]
        self.replies = db[Collections.REPLIES]

    def get_comment(self, comment_id: str) -> Comment | None:
        """Return a comment with its replies attached."""
        document = self.comments.find_one({"id": comment_id})
        if document is None:
            return None
        comment = Comment.model_validate(document)
        comment.replies = self.list_replies(comment.id)
        return comment

    def list_for_post(self, post_id: str, *, with_replies: bool = True) -> list[Comment]:
        """Return the comments of a post in storage order."""
        comments = [
            Comment.model_validate(document)
            for document in self.comments.find({"post_id": post_id})
        ]
        if with_replies:
            for comment in comments:
                comment.replies = self.list_replies(comment.id)
        return comments

    def list_replies(self, comment_id: str) -> list[Reply]:
        """Return the replies to a comment in storage order."""
        return [
            Reply.model_validate(document)
            for document in self.replies.find({"comment_id": comment_id})
        ]

    def add_comment(self, comment: Comment) -> Comment:
        """Insert a comment.

        Raises:
            pymongo.errors.DuplicateKeyError: If the normalized author/body pair
                already exists for the post.
        """
        document = comment.to_document()
        document["_id"] = ObjectId(comment.id)
        self.comments.insert_one(document)
        return comment

    def add_reply(self, reply: Reply) -> Reply:
        """Insert a reply.

        Raises:
            pymongo.errors.DuplicateKeyError: If the normalized author/body pair
                already exists for the comment.
        """
        document = reply.to_document()
        document["_id"] = ObjectId(reply.id)
        self.replies.insert_one(document)
        return reply
