"""Jinja2 template environment for server-side rendering."""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from inkpress.core.settings import settings

templates = Jinja2Templates(directory=str(settings.templates_dir))


def excerpt(content: str, length: int = settings.excerpt_length) -> str:
    """Return at most ``length`` leading characters of a post body."""
    return content[:length]


templates.env.filters["excerpt"] = excerpt
templates.env.globals["site_name"] = settings.app_name


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> Response:
    """Render ``name`` with ``context``."""
    return templates.TemplateResponse(request, name, context or {}, status_code=status_code)
