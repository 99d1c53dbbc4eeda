"""Subtree emitter: renders the indentation tree as parenthesized text."""

from __future__ import annotations

from wlisp.ast import Continuation, Document, Subtree
from wlisp.strings import comment_start


def render(doc: Document) -> list[str]:
    """Render a Document to one record per root-level subtree."""
    return [render_subtree(child) for child in doc.children]


def render_subtree(node: Subtree) -> str:
    """Render one subtree, wrapping it in parentheses when it holds more than one element."""
    children = "\n".join(_render_child(child) for child in node.children)

    parts: list[str] = [node.source.indent]
    if node.needs_parens:
        parts.append("(")

    if node.is_header:
        # The header text itself is dropped; its children take its place
        parts.append(children.lstrip())
    else:
        parts.append(node.source.content)
        if node.children:
            parts.append("\n")
            parts.append(children)

    if node.needs_parens:
        parts.append(_closing_paren("".join(parts), node.source.indent))

    return "".join(parts)


def _render_child(child: Subtree | Continuation) -> str:
    if isinstance(child, Continuation):
        return child.text
    return render_subtree(child)


def _closing_paren(body: str, indent: str) -> str:
    # A ")" after a trailing comment would be commented out
    last_line = body.rsplit("\n", 1)[-1]
    if comment_start(last_line) >= 0:
        return f"\n{indent})"
    return ")"
