"""Database access helpers."""

from inkpress.db.session import Collections, ensure_indexes, get_client, get_db

__all__ = ["Collections", "ensure_indexes", "get_client", "get_db"]
