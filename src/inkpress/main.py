# src/inkpress/main.py
"""Main entry point for the Inkpress application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from inkpress.api import admin_router, blog_router, pages_router, replies_router
from inkpress.core.errors import BlogError, ErrorKind
from inkpress.core.settings import settings
from inkpress.db.session import ensure_indexes, get_db
from inkpress.services.deliverability import get_http_client

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_SUBMISSION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.AUTHORIZATION_FAILED: status.HTTP_403_FORBIDDEN,
    ErrorKind.EXTERNAL_SERVICE_FAILURE: status.HTTP_502_BAD_GATEWAY,
}

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Server-rendered blog with comments, replies and a mailing list",
    version=settings.app_version,
    debug=settings.debug,
)

app.include_router(pages_router)
app.include_router(blog_router)
app.include_router(replies_router)
app.include_router(admin_router)
app.mount("/assets", StaticFiles(directory=settings.assets_dir, check_dir=False), name="assets")


@app.exception_handler(BlogError)
async def blog_error_handler(request: Request, exc: BlogError) -> PlainTextResponse:
    """Map a tagged service error to its status code and a plain-text message."""
    status_code = STATUS_BY_KIND[exc.kind]
    message = exc.message
    if exc.kind is ErrorKind.EXTERNAL_SERVICE_FAILURE:
        message = f"Something went wrong: {message}, try again later"
    logger.info("%s %s -> %d %r", request.method, request.url.path, status_code, exc)
    return PlainTextResponse(message, status_code=status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    """Report malformed path or form parameters as a bad request."""
    return PlainTextResponse("Invalid request parameters", status_code=status.HTTP_400_BAD_REQUEST)


@app.on_event("startup")
async def on_startup() -> None:
    if settings.ensure_indexes:
        ensure_indexes(get_db())


@app.on_event("shutdown")
async def on_shutdown() -> None:
    if get_http_client.cache_info().currsize:
        get_http_client().close()


@app.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    path = settings.assets_dir / "images" / "favicon.ico"
    if not path.is_file():
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return FileResponse(path)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run("inkpress.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
