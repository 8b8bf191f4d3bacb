# src/inkpress/api/endpoints/admin.py
"""Admin-gated post publishing."""

from fastapi import APIRouter, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from inkpress.api.dependencies import PostServiceDep
from inkpress.api.templating import render
from inkpress.schemas.post import NewPostForm
from inkpress.services.post_service import ImageUpload

router = APIRouter(prefix="/admin", tags=["admin"])

IMAGE_FIELD = "blogImage"


@router.get("/new")
async def new_post_form(request: Request) -> Response:
    """Render the publishing form."""
    return render(request, "new-post.html")


@router.post("/new")
async def publish_post(request: Request, posts: PostServiceDep) -> Response:
    """Publish a post from the multipart form.

    Returns the form page again with a status message.
    """
    form = await request.form()
    fields = NewPostForm.model_validate(
        {key: value for key, value in form.items() if isinstance(value, str)}
    )

    image = None
    upload = form.get(IMAGE_FIELD)
    if isinstance(upload, UploadFile):
        image = ImageUpload(filename=upload.filename or "", data=await upload.read())

    result = await run_in_threadpool(posts.create_post, fields, image)
    message = "Post added"
    if not result.notified:
        message = "Post added, but notifying subscribers failed"
    return render(request, "new-post.html", {"message": message, "post_id": result.post.id})
