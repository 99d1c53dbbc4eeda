"""Tests for the indentation tree builder."""

from __future__ import annotations

import pytest

from wlisp.ast import Continuation, Subtree
from wlisp.errors import CompileError, ErrorKind

from .conftest import source_lines


class TestRootScope:
    def test_empty(self, parse_lines):
        doc = parse_lines([])
        assert doc.children == ()
        assert doc.filename == "test.wlisp"

    def test_one_subtree_per_root_line(self, parse_lines):
        doc = parse_lines(["a", "b", "c"])
        assert [c.source.content for c in doc.children] == ["a", "b", "c"]

    def test_only_blank_and_comments(self, parse_lines):
        doc = parse_lines(["", "; note", "   ", "  ; indented note"])
        assert doc.children == ()

    def test_root_pipe_is_not_continuation(self, parse_lines):
        doc = parse_lines(["|x"])
        assert isinstance(doc.children[0], Subtree)
        assert doc.children[0].source.content == "|x"

    def test_indented_first_line_is_root(self, parse_lines):
        doc = parse_lines(["  a", "  b"])
        assert len(doc.children) == 2

    def test_root_children_are_all_subtrees(self, parse_lines):
        doc = parse_lines(["|a", "b", "  c", "  |d"])
        assert [type(c) for c in doc.children] == [Subtree, Subtree]
        assert doc.children[0].source.content == "|a"
        assert isinstance(doc.children[1].children[0].children[0], Continuation)


class TestNesting:
    def test_children(self, parse_lines):
        doc = parse_lines(source_lines("""
            foo
              bar
              baz
            """))
        (root,) = doc.children
        assert root.token_count == 1
        assert [c.source.content for c in root.children] == ["bar", "baz"]

    def test_dedent_returns_to_root(self, parse_lines):
        doc = parse_lines(["a", "  b", "c"])
        assert len(doc.children) == 2
        assert len(doc.children[0].children) == 1

    def test_dedent_through_several_levels(self, parse_lines):
        doc = parse_lines(["a", "  b", "    c", "      d", "e"])
        assert len(doc.children) == 2
        b = doc.children[0].children[0]
        c = b.children[0]
        assert c.children[0].source.content == "d"

    def test_dedent_to_middle_level(self, parse_lines):
        doc = parse_lines(["a", "  b", "    c", "  d"])
        (a,) = doc.children
        assert [c.source.content for c in a.children] == ["b", "d"]

    def test_blank_and_comment_lines_skipped(self, parse_lines):
        doc = parse_lines(["foo", "", "  ; note", "  bar"])
        (root,) = doc.children
        assert len(root.children) == 1

    def test_comment_lines_ignore_indentation_rules(self, parse_lines):
        doc = parse_lines(["foo", "  bar", "     ; odd", "\t; tab", "  baz"])
        (root,) = doc.children
        assert len(root.children) == 2

    def test_token_count_recorded(self, parse_lines):
        doc = parse_lines(["defun f (x) ; doc"])
        assert doc.children[0].token_count == 3


class TestContinuation:
    def test_pipe_without_indent_char(self, parse_lines):
        doc = parse_lines(["foo", "|bar"])
        (root,) = doc.children
        assert root.children == (Continuation("bar", 2),)

    def test_pipe_replaced_by_space(self, parse_lines):
        doc = parse_lines(["a", "  b", "  |c d"])
        b = doc.children[0].children[0]
        assert b.children == (Continuation("   c d", 3),)

    def test_pipe_replaced_by_tab(self, parse_lines):
        doc = parse_lines(["a", "\tb", "\t|c"])
        b = doc.children[0].children[0]
        assert b.children == (Continuation("\t\tc", 3),)

    def test_deeper_pipe_is_a_child(self, parse_lines):
        doc = parse_lines(["a", "  |b"])
        (child,) = doc.children[0].children
        assert isinstance(child, Subtree)
        assert child.source.content == "|b"

    def test_continuation_mixed_with_children(self, parse_lines):
        doc = parse_lines(["a", "|b", "  c", "|d"])
        kinds = [type(c).__name__ for c in doc.children[0].children]
        assert kinds == ["Continuation", "Subtree", "Continuation"]

    def test_continuation_skips_width_check(self, parse_lines):
        doc = parse_lines(["a", "    b", "|c", "    d"])
        assert len(doc.children[0].children) == 3


class TestIndentationErrors:
    def test_inconsistent_sibling(self, parse_lines):
        with pytest.raises(CompileError) as exc_info:
            parse_lines(["foo", "    bar", "  baz"])
        err = exc_info.value
        assert err.kind is ErrorKind.INCONSISTENT_INDENTATION
        assert err.line == 3
        assert err.column == 3

    def test_inconsistent_root(self, parse_lines):
        with pytest.raises(CompileError) as exc_info:
            parse_lines(["  a", "b"])
        assert exc_info.value.kind is ErrorKind.INCONSISTENT_INDENTATION
        assert exc_info.value.line == 2

    def test_mixed_tab_after_spaces(self, parse_lines):
        with pytest.raises(CompileError) as exc_info:
            parse_lines(["foo", "  bar", "\tbaz"])
        err = exc_info.value
        assert err.kind is ErrorKind.MIXED_INDENTATION
        assert err.line == 3
        assert err.column == 1

    def test_mixed_spaces_after_tabs(self, parse_lines):
        with pytest.raises(CompileError) as exc_info:
            parse_lines(["a", "\tb", "c", "  d"])
        assert exc_info.value.kind is ErrorKind.MIXED_INDENTATION
        assert exc_info.value.line == 4

    def test_mixed_reported_before_width(self, parse_lines):
        with pytest.raises(CompileError) as exc_info:
            parse_lines(["a", "    b", "\t\tc"])
        assert exc_info.value.kind is ErrorKind.MIXED_INDENTATION

    def test_blank_line_whitespace_does_not_fix_char(self, parse_lines):
        doc = parse_lines(["a", "\t", "  b"])
        assert len(doc.children[0].children) == 1


class TestParenthesisErrors:
    def test_unclosed(self, parse_lines):
        with pytest.raises(CompileError) as exc_info:
            parse_lines(["(a b"])
        err = exc_info.value
        assert err.kind is ErrorKind.MISMATCHED_PARENTHESES
        assert err.line == 1
        assert err.column == 1

    def test_stray_close_column_includes_indent(self, parse_lines):
        with pytest.raises(CompileError) as exc_info:
            parse_lines(["foo", "  bar)"])
        assert exc_info.value.line == 2
        assert exc_info.value.column == 6

    def test_parent_checked_before_children(self, parse_lines):
        with pytest.raises(CompileError) as exc_info:
            parse_lines(["(a", "  b", "\tc"])
        assert exc_info.value.kind is ErrorKind.MISMATCHED_PARENTHESES
        assert exc_info.value.line == 1

    def test_later_line(self, parse_lines):
        with pytest.raises(CompileError) as exc_info:
            parse_lines(["a", "b", "", "c)"])
        assert exc_info.value.line == 4
