# src/inkpress/schemas/post.py
"""Post-related form and view schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from inkpress.models.comment import Comment
from inkpress.models.post import Post


class NewPostForm(BaseModel):
    """Raw fields of the admin "new post" form.

    Aliases match the HTML form input names.
    """

    title: str = ""
    content: str = ""
    bp_title: str = Field("", alias="bullet-point-Heading")
    bullet_points: str = Field("", alias="bullet-points-content")
    bq_title: str = Field("", alias="blog-quote-Heading")
    blog_quote: str = Field("", alias="blog-quote")
    quote_author: str = Field("", alias="quote-author")
    video_path: str = Field("", alias="youtube-VideoPath")
    admin_password: str = Field("", alias="adminPassword")

    model_config = ConfigDict(populate_by_name=True)


class PostView(BaseModel):
    """Post decorated with the values templates display."""

    id: str
    title: str
    published_date: str
    read_time: int
    content: str
    image_name: str
    bp_title: str
    bullet_points: list[str]
    bq_title: str
    blog_quote: str
    quote_author: str
    video_path: str
    comments: list[Comment]
    num_comments: int


def format_published(post: Post) -> str:
    """Return the publish time in ANSI C ``asctime`` layout."""
    published = post.published
    return (
        f"{published:%a %b} {published.day:2d} {published:%H:%M:%S %Y}"
    )


def to_post_view(post: Post) -> PostView:
    """Convert a Post document to the template view."""
    return PostView.model_construct(
        id=post.id,
        title=post.title,
        published_date=format_published(post),
        read_time=post.read_time,
        content=post.content,
        image_name=post.image_name,
        bp_title=post.bp_title,
        bullet_points=post.bullet_points,
        bq_title=post.bq_title,
        blog_quote=post.blog_quote,
        quote_author=post.quote_author,
        video_path=post.video_path,
        comments=post.comments,
        num_comments=post.num_comments,
    )
