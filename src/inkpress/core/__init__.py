"""Core configuration, error and security helpers."""
