"""Shared test fixtures and helpers."""

from __future__ import annotations

import textwrap

import pytest

from wlisp import transpile
from wlisp.ast import Document
from wlisp.parser import parse


def source_lines(text: str) -> list[str]:
    """Dedent a triple-quoted block and split it into lines."""
    return textwrap.dedent(text).strip("\n").splitlines()


@pytest.fixture
def compile_lines():
    """Return a helper that compiles a list of lines to output records."""

    def _compile(lines: list[str], filename: str = "test.wlisp") -> list[str]:
        return transpile(lines, filename)

    return _compile


@pytest.fixture
def parse_lines():
    """Return a helper that parses a list of lines to a Document."""

    def _parse(lines: list[str], filename: str = "test.wlisp") -> Document:
        return parse(lines, filename)

    return _parse


def paren_balance(text: str) -> int:
    """Net parenthesis depth of emitted text, ignoring strings and comments."""
    from wlisp.strings import mask_strings, strip_comment

    depth = 0
    for line in text.split("\n"):
        for ch in strip_comment(mask_strings(line)):
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
                assert depth >= 0, f"unbalanced ')' in {text!r}"
    return depth
