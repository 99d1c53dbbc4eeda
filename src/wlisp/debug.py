"""--debug subtree dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from wlisp.ast import Continuation, Document, Subtree


def dump_tree(doc: Document, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable subtree forest to *file*."""
    file.write(f"Document {doc.filename}\n")
    for child in doc.children:
        _dump_subtree(child, 1, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_subtree(node: Subtree, depth: int, f: TextIO) -> None:
    kind = "Header" if node.is_header else "Subtree"
    flags = f"tokens={node.token_count} children={len(node.children)}"
    if node.needs_parens:
        flags += " parens"
    f.write(f"{_indent(depth)}{kind} L{node.source.number} {flags} {node.source.content!r}\n")
    for child in node.children:
        if isinstance(child, Continuation):
            f.write(f"{_indent(depth + 1)}Continuation L{child.line} {child.text!r}\n")
        else:
            _dump_subtree(child, depth + 1, f)
