# src/inkpress/api/endpoints/blog.py
"""Single post page and comment submission."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse, Response

from inkpress.api.dependencies import CommentServiceDep, PostServiceDep
from inkpress.api.templating import render
from inkpress.schemas.comment import CommentForm
from inkpress.schemas.post import to_post_view

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("/{post_id}")
async def read_post(post_id: str, request: Request, posts: PostServiceDep) -> Response:
    """Render a post with its comments and replies.

    Raises:
        NotFoundError: If the post does not exist.
    """
    post = posts.get_post(post_id)
    return render(request, "blog-post.html", {"post": to_post_view(post)})


@router.post("/{post_id}")
async def comment_on_post(
    post_id: str,
    request: Request,
    comments: CommentServiceDep,
) -> RedirectResponse:
    """Add a comment and redirect back to the post."""
    form = CommentForm.model_validate(dict(await request.form()))
    comments.add_comment(post_id, form.commentor, form.comment)
    return RedirectResponse(f"/blog/{post_id}", status_code=status.HTTP_303_SEE_OTHER)
