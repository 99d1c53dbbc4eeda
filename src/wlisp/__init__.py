"""wlisp: indentation-based Lisp syntax transpiler."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wlisp.ast import Document
    from wlisp.errors import CompileError

__version__ = "0.1.0"


@dataclass(frozen=True, slots=True)
class CompileResult:
    """Outcome of compiling one file: records on success, the error otherwise."""

    filename: str
    records: tuple[str, ...] = ()
    document: Document | None = None
    error: CompileError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def text(self) -> str:
        """Output file contents: every record followed by a line break."""
        return "".join(f"{record}\n" for record in self.records)


def transpile(lines: Sequence[str], filename: str = "input.wlisp") -> list[str]:
    """Compile the lines of one file to output records. Raises CompileError."""
    from wlisp.parser import parse
    from wlisp.render import render

    return render(parse(lines, filename))


def try_transpile(lines: Sequence[str], filename: str = "input.wlisp") -> CompileResult:
    """Compile the lines of one file without raising on compile errors."""
    from wlisp.errors import CompileError
    from wlisp.parser import parse
    from wlisp.render import render

    try:
        doc = parse(lines, filename)
    except CompileError as exc:
        return CompileResult(filename, error=exc)
    return CompileResult(filename, records=tuple(render(doc)), document=doc)


def compile(source: str, filename: str = "input.wlisp") -> str:
    """Compile whole-file source text to output text."""
    from wlisp.lines import split_lines

    return "".join(f"{record}\n" for record in transpile(split_lines(source), filename))
