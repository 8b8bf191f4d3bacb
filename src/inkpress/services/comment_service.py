"""Service-level helpers for comments and replies."""
from __future__ import annotations

import logging

from pymongo.errors import DuplicateKeyError

from inkpress.core.errors import DuplicateSubmissionError, NotFoundError
from inkpress.core.security import escape_text
from inkpress.models.comment import Comment, Reply
from inkpress.repositories.comment_repo import CommentRepository
from inkpress.repositories.post_repo import PostRepository
from inkpress.services.duplicates import is_duplicate
from inkpress.services.identity import new_id
from inkpress.services.validation import NAME, NAME_MESSAGE, TEXT, FieldCheck, validate_fields

logger = logging.getLogger(__name__)


class CommentService:
    """Add comments to posts and replies to comments.

    Author and body are HTML-escaped before the duplicate check and storage,
    so comparisons always run on the stored form.
    """

    def __init__(self, *, posts: PostRepository, comments: CommentRepository) -> None:
        self._posts = posts
        self._comments = comments

    def add_comment(self, post_id: str, author: str, body: str) -> Comment:
        """Attach a new comment to a post.

        Raises:
            NotFoundError: If the post does not exist.
            ValidationFailedError: If the name or comment is malformed.
            DuplicateSubmissionError: If the same author already left the same comment.
        """
        if self._posts.get_by_id(post_id) is None:
            raise NotFoundError("Post not found", field="post_id")

        validate_fields(
            [
                FieldCheck("commentor", author, NAME, NAME_MESSAGE),
                FieldCheck("comment", body, TEXT, "Invalid input in comment field"),
            ]
        )
        author, body = escape_text(author), escape_text(body)

        existing = self._comments.list_for_post(post_id, with_replies=False)
        if is_duplicate(existing, author, body):
            raise DuplicateSubmissionError("This comment has already been posted", field="comment")

        comment = Comment(id=new_id(), post_id=post_id, author=author, body=body)
        try:
            self._comments.add_comment(comment)
        except DuplicateKeyError as err:
            raise DuplicateSubmissionError(
                "This comment has already been posted", field="comment"
            ) from err
        logger.info("Added comment %s to post %s", comment.id, post_id)
        return comment

    def get_comment(self, comment_id: str) -> Comment:
        """Return a comment with its replies.

        Raises:
            NotFoundError: If no comment has ``comment_id``.
        """
        comment = self._comments.get_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment not found", field="comment_id")
        return comment

    def add_reply(self, comment_id: str, author: str, body: str) -> Reply:
        """Attach a new reply to a comment.

        Duplicates are checked among the replies of the same comment.

        Raises:
            NotFoundError: If the comment does not exist.
            ValidationFailedError: If the name or reply is malformed.
            DuplicateSubmissionError: If the same author already left the same reply.
        """
        comment = self.get_comment(comment_id)

        validate_fields(
            [
                FieldCheck("replier", author, NAME, NAME_MESSAGE),
                FieldCheck("reply", body, TEXT, "Invalid input in reply field"),
            ]
        )
        author, body = escape_text(author), escape_text(body)

        if is_duplicate(comment.replies, author, body):
            raise DuplicateSubmissionError("This reply has already been posted", field="reply")

        reply = Reply(id=new_id(), comment_id=comment.id, author=author, body=body)
        try:
            self._comments.add_reply(reply)
        except DuplicateKeyError as err:
            raise DuplicateSubmissionError(
                "This reply has already been posted", field="reply"
            ) from err
        logger.info("Added reply %s to comment %s", reply.id, comment.id)
        return reply

    def post_url_for_reply(self, reply: Reply) -> str:
        """Resolve reply → comment → post and return the post page path.

        Raises:
            NotFoundError: If the comment or its post no longer resolves.
        """
        comment = self.get_comment(reply.comment_id)
        post = self._posts.get_by_id(comment.post_id)
        if post is None:
            raise NotFoundError("Post not found", field="post_id")
        return f"/blog/{post.id}"
