"""Form field validation rules.

Each rule is a full-match regular expression. Services validate every field
before any side effect and stop at the first failure.
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from inkpress.core.errors import ValidationFailedError

_TEXT_PUNCTUATION: Final[str] = r".,?/\\~!@#$%\[\]{}^&*()\-_+=|:;'\"<>"
# ASCII whitespace only; "\s" on str patterns also admits Unicode separators.
_SPACE: Final[str] = r" \t\n\f\r"


@dataclass(frozen=True)
class FieldRule:
    """A named full-match pattern."""

    name: str
    pattern: re.Pattern[str]


def _rule(name: str, expression: str) -> FieldRule:
    return FieldRule(name=name, pattern=re.compile(expression))


TEXT = _rule("text", rf"[{_SPACE}a-zA-Z0-9{_TEXT_PUNCTUATION}]+")
HEADING = _rule("heading", rf"[{_SPACE}a-zA-Z0-9.,?/\\]+")
QUOTE_AUTHOR = _rule("quote_author", rf"[{_SPACE}a-zA-Z]+")
VIDEO_PATH = _rule("video_path", rf"[{_SPACE}a-zA-Z0-9_]+")
NAME = _rule("name", rf"[a-zA-Z{_SPACE}_]{{2,35}}")
EMAIL = _rule(
    "email",
    r"([a-zA-Z0-9.!#$%&'*+/=?^_{|}~-]{3,})@([a-zA-Z0-9]{2,})\.([a-zA-Z]{2,})(\.[a-zA-Z]+)?",
)


def validate(value: str, rule: FieldRule) -> bool:
    """Return True if ``value`` matches ``rule`` in full."""
    return rule.pattern.fullmatch(value) is not None


@dataclass(frozen=True)
class FieldCheck:
    """One field to validate, with the message reported on failure."""

    field: str
    value: str
    rule: FieldRule
    message: str
    required: bool = True


def validate_fields(checks: Iterable[FieldCheck]) -> None:
    """Validate fields in order, raising on the first violation.

    Optional fields are skipped when empty.

    Raises:
        ValidationFailedError: For the first field that does not match.
    """
    for check in checks:
        if not check.required and check.value == "":
            continue
        if not validate(check.value, check.rule):
            raise ValidationFailedError(check.message, field=check.field)


NAME_MESSAGE: Final[str] = (
    'Invalid input in name field or name not given, only "_" special character is '
    "allowed in name field, a minimum of two characters and maximum of 35 characters"
)
