"""Page-number based windows over the post list."""
from __future__ import annotations

from typing import Final

from inkpress.core.errors import ValidationFailedError
from inkpress.models.post import Post
from inkpress.repositories.comment_repo import CommentRepository
from inkpress.repositories.post_repo import PostRepository

PAGE_SIZE: Final[int] = 8


class Paginator:
    """Map a zero-based page number to a window of posts, newest first.

    The page number is carried by the caller, so every request is
    self-describing and replaying it yields the same window until new posts
    are published.
    """

    def __init__(
        self,
        posts: PostRepository,
        comments: CommentRepository,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self._posts = posts
        self._comments = comments
        self.page_size = page_size

    def fetch_page(self, page_number: int) -> list[Post]:
        """Return at most ``page_size`` posts for ``page_number``.

        An empty list means there are no posts on this page. Each post has its
        comments attached so list views can show a count.

        Raises:
            ValidationFailedError: If ``page_number`` is negative.
        """
        if page_number < 0:
            raise ValidationFailedError("Invalid page number", field="page")
        posts = self._posts.list_window(
            skip=self.page_size * page_number,
            limit=self.page_size,
        )
        for post in posts:
            post.comments = self._comments.list_for_post(post.id)
        return posts

    def last_page(self) -> int:
        """Return the highest page number holding posts, 0 when there are none."""
        total = self._posts.count()
        return max(total - 1, 0) // self.page_size
