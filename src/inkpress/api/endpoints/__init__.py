"""Route modules."""

from .admin import router as admin_router
from .blog import router as blog_router
from .pages import router as pages_router
from .replies import router as replies_router

__all__ = ["admin_router", "blog_router", "pages_router", "replies_router"]
