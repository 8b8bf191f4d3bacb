"""Service layer for the blog."""
