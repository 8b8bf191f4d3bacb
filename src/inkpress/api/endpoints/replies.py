# src/inkpress/api/endpoints/replies.py
"""Reply page and reply submission."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse, Response

from inkpress.api.dependencies import CommentServiceDep
from inkpress.api.templating import render
from inkpress.schemas.comment import ReplyForm

router = APIRouter(prefix="/reply", tags=["replies"])


@router.get("/{comment_id}")
async def reply_form(comment_id: str, request: Request, comments: CommentServiceDep) -> Response:
    """Render a comment, its replies and the reply form."""
    comment = comments.get_comment(comment_id)
    return render(request, "reply.html", {"comment": comment})


@router.post("/{comment_id}")
async def reply_to_comment(
    comment_id: str,
    request: Request,
    comments: CommentServiceDep,
) -> RedirectResponse:
    """Add a reply and redirect to the page of the post it belongs to."""
    form = ReplyForm.model_validate(dict(await request.form()))
    reply = comments.add_reply(comment_id, form.replier, form.reply)
    return RedirectResponse(
        comments.post_url_for_reply(reply),
        status_code=status.HTTP_303_SEE_OTHER,
    )
