"""HTTP routes for the blog."""

from .endpoints import admin_router, blog_router, pages_router, replies_router

__all__ = ["admin_router", "blog_router", "pages_router", "replies_router"]
