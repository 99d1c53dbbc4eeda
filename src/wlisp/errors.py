"""Compile error types with formatted source context."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    MIXED_INDENTATION = "Mixed use of tabs and spaces"
    INCONSISTENT_INDENTATION = "Inconsistent indentation"
    MISMATCHED_PARENTHESES = "Mismatched parentheses"


class ParenthesisError(ValueError):
    """Raised by the token counter; the parser attaches file and line.

    ``offset`` is 0-based within the counted content.
    """

    kind = ErrorKind.MISMATCHED_PARENTHESES

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"{self.kind.value} at offset {offset}")


class CompileError(Exception):
    """Fatal error for one file, with 1-based line and column."""

    def __init__(
        self,
        kind: ErrorKind,
        filename: str,
        line: int,
        column: int,
        source_line: str,
    ) -> None:
        self.kind = kind
        self.message = kind.value
        self.filename = filename
        self.line = line
        self.column = column
        self.source_line = source_line
        super().__init__(f"{filename}:{line}: {self.message}")

    def format(self) -> str:
        source_line = self.source_line.rstrip("\n").rstrip("\r")
        # Tabs would throw the caret off; show them as single spaces
        shown = source_line.replace("\t", " ")
        pad = " " * (self.column - 1)

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"{self}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {shown}\n"
            f"{blank_gutter} {pad}^"
        )
