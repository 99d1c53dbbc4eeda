"""Value types for the indentation tree of one source file."""

from __future__ import annotations

import re
from dataclasses import dataclass

from wlisp.lines import SourceLine

# One character repeated; the last alternative is U+203E OVERLINE.
BLOCK_HEADER_RE = re.compile(r"\.+|-+|_+|‾+")


def is_block_header(text: str) -> bool:
    """True if the trimmed text is a separator-only block header."""
    return BLOCK_HEADER_RE.fullmatch(text.strip()) is not None


@dataclass(frozen=True, slots=True)
class Continuation:
    """A pipe-prefixed line carried through verbatim."""

    text: str
    line: int


@dataclass(frozen=True, slots=True)
class Subtree:
    """A source line with the nested lines that belong to it."""

    source: SourceLine
    token_count: int
    children: tuple[Subtree | Continuation, ...]

    @property
    def needs_parens(self) -> bool:
        return len(self.children) + self.token_count > 1

    @property
    def is_header(self) -> bool:
        return is_block_header(self.source.text)


@dataclass(frozen=True, slots=True)
class Document:
    """Root of a parsed file: one Subtree per root-level line."""

    children: tuple[Subtree, ...]
    filename: str
