"""Service-level helpers for publishing and reading posts."""
from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import PurePath

from inkpress.core.errors import (
    AuthorizationFailedError,
    BlogError,
    NotFoundError,
    ValidationFailedError,
)
from inkpress.core.security import verify_admin_password
from inkpress.models.post import Post
from inkpress.repositories.comment_repo import CommentRepository
from inkpress.repositories.post_repo import PostRepository
from inkpress.repositories.subscriber_repo import SubscriberRepository
from inkpress.schemas.post import NewPostForm
from inkpress.services.file_store import ImageStore
from inkpress.services.identity import new_id
from inkpress.services.mailer import Mailer, new_post_message
from inkpress.services.validation import (
    HEADING,
    QUOTE_AUTHOR,
    TEXT,
    VIDEO_PATH,
    FieldCheck,
    validate_fields,
)

logger = logging.getLogger(__name__)

BULLET_SEPARATOR = "/"


@dataclass(frozen=True)
class ImageUpload:
    """An uploaded image as received from the form."""

    filename: str
    data: bytes

    @property
    def extension(self) -> str:
        return PurePath(self.filename).suffix


@dataclass(frozen=True)
class PublishResult:
    """Outcome of publishing a post."""

    post: Post
    notified: bool


def compute_read_time(*parts: str) -> int:
    """Return the read-time proxy: total characters / 100, rounded half up."""
    total = sum(len(part) for part in parts)
    return math.floor(total / 100 + 0.5)


def split_bullet_points(raw: str) -> list[str]:
    """Split the delimited bullet field into trimmed, non-empty items."""
    return [item.strip() for item in raw.split(BULLET_SEPARATOR) if item.strip()]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _post_checks(form: NewPostForm) -> list[FieldCheck]:
    return [
        FieldCheck("title", form.title, TEXT, "Invalid character in blog title"),
        FieldCheck("content", form.content, TEXT, "Invalid character in content"),
        FieldCheck(
            "bullet-point-Heading",
            form.bp_title,
            HEADING,
            "Invalid character in bullet point heading",
            required=False,
        ),
        FieldCheck(
            "bullet-points-content",
            form.bullet_points,
            TEXT,
            "Invalid character in bullet points content",
            required=False,
        ),
        FieldCheck(
            "blog-quote-Heading",
            form.bq_title,
            HEADING,
            "Invalid character in blog quote heading",
            required=False,
        ),
        FieldCheck(
            "blog-quote",
            form.blog_quote,
            TEXT,
            "Invalid character in blog quote content",
            required=False,
        ),
        FieldCheck(
            "quote-author",
            form.quote_author,
            QUOTE_AUTHOR,
            "Invalid character in blog quote author",
            required=False,
        ),
        FieldCheck(
            "youtube-VideoPath",
            form.video_path,
            VIDEO_PATH,
            "Invalid character in youtube video path",
            required=False,
        ),
        FieldCheck("adminPassword", form.admin_password, TEXT, "Invalid character in admin password"),
    ]


class PostService:
    """Publish posts and read them back with their comment trees."""

    def __init__(
        self,
        *,
        posts: PostRepository,
        comments: CommentRepository,
        subscribers: SubscriberRepository,
        mailer: Mailer,
        image_store: ImageStore,
        admin_password_hash: str,
        site_name: str,
        site_url: str,
        strict_notifications: bool = False,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._posts = posts
        self._comments = comments
        self._subscribers = subscribers
        self._mailer = mailer
        self._image_store = image_store
        self._admin_password_hash = admin_password_hash
        self._site_name = site_name
        self._site_url = site_url
        self._strict_notifications = strict_notifications
        self._clock = clock

    def create_post(self, form: NewPostForm, image: ImageUpload | None) -> PublishResult:
        """Validate, store and announce a new post.

        Args:
            form: Raw form fields including the admin password.
            image: Uploaded cover image.

        Returns:
            The stored post and whether subscribers were notified.

        Raises:
            ValidationFailedError: If a field or the image is invalid.
            AuthorizationFailedError: If the admin password does not match.
            ExternalServiceError: If the image cannot be stored, or if
                notification fails while strict notifications are enabled.

        Notes:
            By default the post is persisted before subscribers are mailed and
            a mail failure only clears ``notified``. With strict notifications
            the mail goes out first and a failure aborts the publish.
        """
        validate_fields(_post_checks(form))
        if not verify_admin_password(form.admin_password, self._admin_password_hash):
            logger.warning("Rejected new post with an invalid admin password")
            raise AuthorizationFailedError("Invalid admin password", field="adminPassword")

        if image is None or not image.filename or not image.data:
            raise ValidationFailedError("A blog image is required", field="blogImage")
        ImageStore.check_extension(image.extension)

        post_id = new_id()
        image_name = self._image_store.save(image.data, image.extension, post_id)

        post = Post(
            id=post_id,
            title=form.title,
            published=self._clock(),
            read_time=compute_read_time(
                form.title,
                form.content,
                form.bp_title,
                form.bullet_points,
                form.blog_quote,
                form.quote_author,
            ),
            content=form.content,
            image_name=image_name,
            bp_title=form.bp_title,
            bullet_points=split_bullet_points(form.bullet_points),
            bq_title=form.bq_title,
            blog_quote=form.blog_quote,
            quote_author=form.quote_author,
            video_path=form.video_path,
        )

        try:
            if self._strict_notifications:
                self._notify(post)
            self._posts.create(post)
        except Exception:
            self._image_store.delete(image_name)
            raise
        logger.info("Published post %s", post.id)
        if self._strict_notifications:
            return PublishResult(post=post, notified=True)

        try:
            self._notify(post)
        except BlogError as err:
            logger.warning("Post %s published but notification failed: %s", post.id, err)
            return PublishResult(post=post, notified=False)
        return PublishResult(post=post, notified=True)

    def _notify(self, post: Post) -> None:
        recipients = self._subscribers.list_emails()
        subject, body = new_post_message(self._site_name, self._site_url, post.id, post.title)
        self._mailer.send(recipients, subject, body)

    def get_post(self, post_id: str) -> Post:
        """Return a post with its comments and their replies.

        Raises:
            NotFoundError: If no post has ``post_id``.
        """
        post = self._posts.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Post not found", field="post_id")
        post.comments = self._comments.list_for_post(post.id)
        return post
