"""Line classification and file-scoped indentation tracking."""

from __future__ import annotations

import re
from dataclasses import dataclass

INDENT_CHARS = " \t"
COMMENT_CHAR = ";"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class SourceLine:
    """One raw source line, 0-based index, with derived indentation facts."""

    text: str
    index: int
    width: int
    is_blank: bool
    is_comment: bool

    @property
    def number(self) -> int:
        """1-based line number, as used in diagnostics."""
        return self.index + 1

    @property
    def indent(self) -> str:
        return self.text[: self.width]

    @property
    def content(self) -> str:
        return self.text[self.width :]

    @property
    def skipped(self) -> bool:
        """Blank and comment-only lines never become nodes."""
        return self.is_blank or self.is_comment


def leading_width(text: str) -> int:
    """Count consecutive leading spaces and tabs."""
    count = 0
    for ch in text:
        if ch not in INDENT_CHARS:
            break
        count += 1
    return count


def classify(text: str, index: int) -> SourceLine:
    """Build a SourceLine from raw text."""
    stripped = text.lstrip()
    return SourceLine(
        text=text,
        index=index,
        width=leading_width(text),
        is_blank=not stripped,
        is_comment=stripped.startswith(COMMENT_CHAR),
    )


class IndentTracker:
    """Fix the indentation character on first use and enforce it afterwards.

    One tracker lives for the compilation of one file.
    """

    def __init__(self) -> None:
        self.char: str | None = None

    def check(self, line: SourceLine) -> int | None:
        """Return the 0-based column of the first foreign indent char, or None."""
        for col, ch in enumerate(line.indent):
            if self.char is None:
                self.char = ch
            elif ch != self.char:
                return col
        return None


def split_lines(text: str) -> list[str]:
    """Split source text on CR, LF and CRLF only.

    Unlike str.splitlines, form feeds and Unicode separators stay inside
    their line. A final line break does not start an extra empty line.
    """
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines
