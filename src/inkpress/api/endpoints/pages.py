# src/inkpress/api/endpoints/pages.py
"""Post list pages, the about page and newsletter sign-up."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse, Response
from starlette.concurrency import run_in_threadpool

from inkpress.api.dependencies import PaginatorDep, SubscriberServiceDep
from inkpress.api.templating import render
from inkpress.models.post import Post
from inkpress.schemas.post import to_post_view
from inkpress.schemas.subscriber import SubscribeForm
from inkpress.services.pagination import Paginator
from inkpress.services.subscriber_service import SubscriberService

router = APIRouter(tags=["pages"])

SUBSCRIBED_NOTICE = "Thanks for subscribing, check your inbox for a welcome mail."


def _redirect(path: str) -> RedirectResponse:
    return RedirectResponse(path, status_code=status.HTTP_303_SEE_OTHER)


async def _subscribe_if_posted(request: Request, subscribers: SubscriberService) -> str | None:
    """Register the submitted address on POST and return the notice to show."""
    if request.method != "POST":
        return None
    form = SubscribeForm.model_validate(dict(await request.form()))
    await run_in_threadpool(subscribers.subscribe, form.email)
    return SUBSCRIBED_NOTICE


def _render_index(request: Request, page: int, posts: list[Post], notice: str | None) -> Response:
    return render(
        request,
        "index.html",
        {
            "posts": [to_post_view(post) for post in posts],
            "page": page,
            "notice": notice,
        },
    )


async def _page(
    request: Request,
    paginator: Paginator,
    subscribers: SubscriberService,
    page: int,
) -> Response:
    notice = await _subscribe_if_posted(request, subscribers)
    return _render_index(request, page, paginator.fetch_page(page), notice)


@router.get("/", include_in_schema=False)
async def visit() -> RedirectResponse:
    """Send visitors to the home page."""
    return _redirect("/home")


@router.api_route("/home", methods=["GET", "POST"])
async def home(
    request: Request,
    paginator: PaginatorDep,
    subscribers: SubscriberServiceDep,
) -> Response:
    """Show the most recent posts."""
    return await _page(request, paginator, subscribers, 0)


@router.api_route("/next/{page}", methods=["GET", "POST"])
async def next_page(
    page: int,
    request: Request,
    paginator: PaginatorDep,
    subscribers: SubscriberServiceDep,
) -> Response:
    """Show an older page; past the end, jump to the last page holding posts."""
    if page <= 0:
        return _redirect("/home")
    notice = await _subscribe_if_posted(request, subscribers)
    posts = paginator.fetch_page(page)
    if not posts and notice is None:
        last = paginator.last_page()
        return _redirect("/home" if last == 0 else f"/next/{last}")
    return _render_index(request, page, posts, notice)


@router.api_route("/previous/{page}", methods=["GET", "POST"])
async def previous_page(
    page: int,
    request: Request,
    paginator: PaginatorDep,
    subscribers: SubscriberServiceDep,
) -> Response:
    """Show a newer page; below page 1 this is the home page."""
    if page < 1:
        return _redirect("/home")
    return await _page(request, paginator, subscribers, page)


@router.api_route("/about", methods=["GET", "POST"])
async def about(request: Request, subscribers: SubscriberServiceDep) -> Response:
    """Show the about page; POST subscribes and redirects back."""
    if await _subscribe_if_posted(request, subscribers):
        return _redirect("/about")
    return render(request, "about.html")
