"""String-literal masking and comment detection."""

from __future__ import annotations

import re

from wlisp.lines import COMMENT_CHAR

# Double-quoted literal; \\ and \" are escapes. An unterminated quote never matches.
STRING_RE = re.compile(r'"(?:\\\\|\\"|.)*?"')

STRING_PLACEHOLDER = "s"


def mask_strings(text: str) -> str:
    """Replace every string literal with opaque placeholder characters.

    The mask keeps the literal's length so offsets into the result still
    point at the same columns of the original text. A run of placeholders
    contains no spaces, parentheses or comment markers, so it is a single
    token wherever a one-character mask would be.
    """
    return STRING_RE.sub(lambda m: STRING_PLACEHOLDER * len(m.group(0)), text)


def comment_start(text: str) -> int:
    """Offset of the first comment marker outside a string, or -1."""
    return mask_strings(text).find(COMMENT_CHAR)


def strip_comment(text: str) -> str:
    """Drop a trailing comment, honoring string literals."""
    idx = comment_start(text)
    if idx < 0:
        return text
    return text[:idx]
