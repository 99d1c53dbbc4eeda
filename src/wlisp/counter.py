"""Top-level token counting for a single line of content."""

from __future__ import annotations

import re

from wlisp.errors import ParenthesisError
from wlisp.strings import mask_strings, strip_comment

GROUP_PLACEHOLDER = "p"

_SEPARATOR_RE = re.compile(" +")


def fold_groups(text: str) -> str:
    """Collapse every balanced top-level parenthesized group to one character.

    Characters inside a group are dropped. Raises ParenthesisError on a
    stray ``)`` or on a group left open at the end of the text.
    """
    folded: list[str] = []
    depth = 0
    open_at = -1
    for offset, ch in enumerate(text):
        if ch == "(":
            if depth == 0:
                open_at = offset
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise ParenthesisError(offset)
            if depth == 0:
                folded.append(GROUP_PLACEHOLDER)
        elif depth == 0:
            folded.append(ch)
    if depth > 0:
        raise ParenthesisError(open_at)
    return "".join(folded)


def count_tokens(content: str) -> int:
    """Return the number of top-level tokens in a line's content.

    Strings count as one token whatever they contain, comments are ignored,
    and a balanced parenthesized group counts as one token.
    """
    text = strip_comment(mask_strings(content))
    return len([part for part in _SEPARATOR_RE.split(fold_groups(text)) if part])
