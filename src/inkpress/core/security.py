"""Credential and markup-safety helpers."""
from __future__ import annotations

import bcrypt
import bleach


def verify_admin_password(candidate: str, password_hash: str) -> bool:
    """Check a submitted admin password against the stored bcrypt hash.

    Args:
        candidate: Plain-text password submitted with the form.
        password_hash: bcrypt hash from configuration.

    Returns:
        True if the password matches; False otherwise, including when no hash
        is configured or the hash is malformed.
    """
    if not candidate or not password_hash:
        return False
    try:
        return bcrypt.checkpw(candidate.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def hash_admin_password(password: str) -> str:
    """Return a bcrypt hash suitable for ``ADMIN_PASSWORD_HASH``."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def escape_text(value: str) -> str:
    """Escape markup in untrusted text so it renders literally."""
    return bleach.clean(value, tags=set(), attributes={}, strip=False)
