"""Tree builder: groups source lines into subtrees by indentation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

from wlisp.ast import Continuation, Document, Subtree
from wlisp.counter import count_tokens
from wlisp.errors import CompileError, ErrorKind, ParenthesisError
from wlisp.lines import IndentTracker, SourceLine, classify

CONTINUATION_CHAR = "|"

# Every non-blank line is deeper than the root.
ROOT_WIDTH = -1


class Parser:
    """Single-pass indentation parser over the lines of one file.

    Holds the file-scoped state: a forward cursor with one step of undo, and
    the indentation character fixed by the first indented line.
    """

    def __init__(self, lines: Sequence[str], filename: str) -> None:
        self._lines = lines
        self._filename = filename
        self._pos = 0
        self._indent = IndentTracker()

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def _next_line(self) -> SourceLine | None:
        if self._pos >= len(self._lines):
            return None
        line = classify(self._lines[self._pos], self._pos)
        self._pos += 1
        return line

    def _unread(self) -> None:
        self._pos -= 1

    def _error(self, kind: ErrorKind, line: SourceLine, column: int) -> CompileError:
        return CompileError(kind, self._filename, line.number, column, line.text)

    # ------------------------------------------------------------------
    # Tree building
    # ------------------------------------------------------------------

    def parse(self) -> Document:
        children = self._collect_children(ROOT_WIDTH)
        # A continuation needs width == parent width, which -1 never is
        return Document(cast("tuple[Subtree, ...]", tuple(children)), self._filename)

    def _collect_children(self, parent_width: int) -> list[Subtree | Continuation]:
        children: list[Subtree | Continuation] = []
        child_width: int | None = None

        while True:
            line = self._next_line()
            if line is None:
                break
            if line.skipped:
                continue

            bad_col = self._indent.check(line)
            if bad_col is not None:
                raise self._error(ErrorKind.MIXED_INDENTATION, line, bad_col + 1)

            if line.width > parent_width:
                if child_width is None:
                    child_width = line.width
                if line.width != child_width:
                    raise self._error(ErrorKind.INCONSISTENT_INDENTATION, line, line.width + 1)
                children.append(self._parse_subtree(line))
            elif line.width == parent_width and line.content.startswith(CONTINUATION_CHAR):
                children.append(self._continuation(line))
            else:
                self._unread()
                break

        return children

    def _parse_subtree(self, line: SourceLine) -> Subtree:
        # Own tokens are counted before any child line is read
        try:
            token_count = count_tokens(line.content)
        except ParenthesisError as exc:
            column = line.width + exc.offset + 1
            raise self._error(exc.kind, line, column) from None

        children = self._collect_children(line.width)
        return Subtree(line, token_count, tuple(children))

    def _continuation(self, line: SourceLine) -> Continuation:
        text = line.indent + (self._indent.char or "") + line.content[1:]
        return Continuation(text, line.number)


def parse(lines: Sequence[str], filename: str = "input.wlisp") -> Document:
    """Parse the lines of one file into a Document."""
    return Parser(lines, filename).parse()
