"""Inkpress: a server-rendered blog with comments, replies and a mailing list."""

__version__ = "0.1.0"
