# src/inkpress/models/post.py
"""Post document model."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from inkpress.models.comment import Comment


class Post(BaseModel):
    """A published blog entry.

    Collection name: "posts". Comments are stored in their own collection and
    attached to ``comments`` only when a post is read.
    """

    id: str = Field(..., description="24-char hex identifier, immutable")
    title: str
    published: datetime = Field(..., description="Set once at creation")
    read_time: int = 0
    content: str
    image_name: str = ""
    bp_title: str = Field("", description="Bullet point heading")
    bullet_points: list[str] = Field(default_factory=list)
    bq_title: str = Field("", description="Blog quote heading")
    blog_quote: str = ""
    quote_author: str = ""
    video_path: str = Field("", description="YouTube video path token")
    comments: list[Comment] = Field(default_factory=list, exclude=True)

    model_config = ConfigDict(extra="ignore")

    def to_document(self) -> dict[str, Any]:
        """Return the persisted representation without attached comments."""
        return self.model_dump()

    @property
    def num_comments(self) -> int:
        return len(self.comments)
