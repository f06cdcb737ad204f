"""
Tests for EntityLineParser.

Covers command extraction, parenthesis unwrapping, argument splitting and
whitespace handling.
"""
from __future__ import annotations

import pytest

from btsp_compiler.models import Entity
from btsp_compiler.parser.entity_parser import EntityLineParser


@pytest.fixture
def parser():
    return EntityLineParser()


# ─────────────────────────────────────────────────────────────────────────────
# Lines without the ?? marker
# ─────────────────────────────────────────────────────────────────────────────


class TestPlainCommands:
    @pytest.mark.parametrize(
        "line",
        ["foo", "halt", "  indented  ", "a, b, c", "(x)", "one ? two", "\t"],
    )
    def test_whole_line_is_command(self, parser, line):
        ent = parser.parse(line)
        assert ent.command == line
        assert ent.args == []

    def test_empty_line(self, parser):
        assert parser.parse("") == Entity(command="", args=[])


# ─────────────────────────────────────────────────────────────────────────────
# Command / argument split
# ─────────────────────────────────────────────────────────────────────────────


class TestCommandWithArgs:
    def test_wrapped_args(self, parser):
        ent = parser.parse("greet??(name, Bob)")
        assert ent.command == "greet"
        assert ent.args == ["name", "Bob"]

    def test_whitespace_trimmed_around_args(self, parser):
        ent = parser.parse("a??( x , y )")
        assert ent.command == "a"
        assert ent.args == ["x", "y"]

    def test_unwrapped_args(self, parser):
        ent = parser.parse("set??x, 1")
        assert ent.args == ["x", "1"]

    def test_command_not_trimmed(self, parser):
        ent = parser.parse("  greet ??(x)")
        assert ent.command == "  greet "
        assert ent.args == ["x"]

    def test_empty_tokens_dropped(self, parser):
        assert parser.parse("f??a,,b").args == ["a", "b"]

    def test_whitespace_only_payload(self, parser):
        assert parser.parse("f??   ").args == []

    def test_empty_parens(self, parser):
        ent = parser.parse("f??()")
        assert ent.command == "f"
        assert ent.args == []

    def test_marker_only(self, parser):
        ent = parser.parse("??")
        assert ent.command == ""
        assert ent.args == []

    def test_split_on_first_marker(self, parser):
        ent = parser.parse("f??(a??b)")
        assert ent.command == "f"
        assert ent.args == ["a??b"]

    def test_tabs_and_carriage_returns_trimmed(self, parser):
        assert parser.parse("f??(\ta\r,\tb \r)").args == ["a", "b"]

    def test_quotes_kept(self, parser):
        assert parser.parse('print??("hello")').args == ['"hello"']


# ─────────────────────────────────────────────────────────────────────────────
# Parenthesis handling
# ─────────────────────────────────────────────────────────────────────────────


class TestParentheses:
    def test_leading_space_prevents_unwrap(self, parser):
        # The payload starts with a space, so the pair does not span it
        ent = parser.parse("f?? (a, b)")
        assert ent.args == ["(a", "b)"]

    def test_unbalanced_open_kept(self, parser):
        assert parser.parse("f??(a, b").args == ["(a", "b"]

    def test_unbalanced_close_kept(self, parser):
        assert parser.parse("f??a, b)").args == ["a", "b)"]

    def test_nested_parens_pass_through(self, parser):
        ent = parser.parse("call??(g(x), y)")
        assert ent.args == ["g(x)", "y"]

    def test_only_outer_pair_removed(self, parser):
        assert parser.parse("f??((a))").args == ["(a)"]

    def test_not_a_balanced_parse(self, parser):
        # First and last characters are a matching pair structurally, even
        # though they belong to different groups
        assert parser.parse("f??(a), (b)").args == ["a)", "(b"]

    def test_commas_inside_nested_parens_still_split(self, parser):
        assert parser.parse("f??(g(x, y))").args == ["g(x", "y)"]
