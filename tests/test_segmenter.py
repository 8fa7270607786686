"""Tests for splitting SQL into segments."""

import pytest

from sqlcolor import Category, get_segments
from sqlcolor.core.models import Match
from sqlcolor.core.segmenter import build_segments


SAMPLES = [
    "",
    "x",
    "(a",
    "SELECT * FROM t",
    "SELECT count(id) FROM users WHERE age >= 18.5\nLIMIT 10;",
    "INSERT INTO student(id,name) VALUES (1,'Alice');",
    "UPDATE t SET a='it\\'s', b=\"q\\\"q\" WHERE `c` != -3\n",
    "'unterminated = 1",
    "\n\n\n",
    "select\tDISTINCT\r\nfoo.bar(baz) % 2 FROM x;;",
    "ünïcode = 'é' AND 1",
]


class TestCoverage:

    @pytest.mark.parametrize("sql", SAMPLES)
    def test_concatenation_reproduces_input(self, sql):
        segments = get_segments(sql)
        assert ''.join(segment.content for segment in segments) == sql

    @pytest.mark.parametrize("sql", SAMPLES)
    def test_segments_are_contiguous_and_non_empty(self, sql):
        position = 0
        for segment in get_segments(sql):
            assert segment.content
            assert sql[position:position + len(segment.content)] == segment.content
            position += len(segment.content)
        assert position == len(sql)

    def test_empty_input(self):
        assert get_segments("") == []

    def test_trailing_single_character_is_kept(self, pairs):
        assert pairs(get_segments("(a")) == [("bracket", "("), ("default", "a")]

    def test_input_without_matches_is_one_default_segment(self, pairs):
        assert pairs(get_segments("x")) == [("default", "x")]

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            get_segments(None)


class TestCategories:

    def test_keyword_boundary(self, pairs):
        assert pairs(get_segments("SELECT * FROM t")) == [
            ("keyword", "SELECT"),
            ("default", " "),
            ("special", "*"),
            ("default", " "),
            ("keyword", "FROM"),
            ("default", " t"),
        ]

    def test_function_excludes_parenthesis(self, pairs):
        assert pairs(get_segments("foo(")) == [("function", "foo"), ("bracket", "(")]

    def test_number_after_letter_is_not_a_number(self, pairs):
        assert pairs(get_segments("x1")) == [("default", "x1")]

    def test_number_after_operator(self, pairs):
        assert pairs(get_segments("=1")) == [("special", "="), ("number", "1")]

    def test_escaped_quote_stays_inside_string(self, pairs):
        sql = "SELECT 'a\\'b' FROM t"
        assert pairs(get_segments(sql)) == [
            ("keyword", "SELECT"),
            ("default", " "),
            ("string", "'a\\'b'"),
            ("default", " "),
            ("keyword", "FROM"),
            ("default", " t"),
        ]

    def test_full_query(self, pairs):
        sql = "SELECT count(id) FROM users WHERE age >= 18.5\nLIMIT 10;"
        assert pairs(get_segments(sql)) == [
            ("keyword", "SELECT"),
            ("default", " "),
            ("function", "count"),
            ("bracket", "("),
            ("default", "id"),
            ("bracket", ")"),
            ("default", " "),
            ("keyword", "FROM"),
            ("default", " users "),
            ("keyword", "WHERE"),
            ("default", " age "),
            ("special", ">"),
            ("special", "="),
            ("default", " "),
            ("number", "18.5"),
            ("whitespace", "\n"),
            ("keyword", "LIMIT"),
            ("default", " "),
            ("number", "10"),
            ("special", ";"),
        ]

    def test_segment_categories_are_enum_members(self):
        segments = get_segments("SELECT 1")
        assert [segment.category for segment in segments] == [
            Category.KEYWORD, Category.DEFAULT, Category.NUMBER,
        ]


class TestConflicts:

    def test_earlier_rule_wins_at_same_offset(self, pairs):
        # Keyword and function both start at 0; keyword rule runs first
        assert pairs(get_segments("IN(1)")) == [
            ("keyword", "IN"),
            ("bracket", "("),
            ("number", "1"),
            ("bracket", ")"),
        ]

    def test_matches_inside_string_are_discarded(self, pairs):
        assert pairs(get_segments("'a=1'")) == [("string", "'a=1'")]

    def test_unterminated_string_degrades_to_other_rules(self, pairs):
        assert pairs(get_segments("'abc = 1")) == [
            ("default", "'abc "),
            ("special", "="),
            ("default", " "),
            ("number", "1"),
        ]


class TestBuildSegments:

    def test_discards_candidates_inside_accepted_span(self, pairs):
        text = "abcdef"
        matches = [
            Match(Category.STRING, 1, 3),
            Match(Category.NUMBER, 2, 1),
            Match(Category.KEYWORD, 4, 1),
        ]
        assert pairs(build_segments(text, matches)) == [
            ("default", "a"),
            ("string", "bcd"),
            ("keyword", "e"),
            ("default", "f"),
        ]

    def test_ties_keep_input_order(self, pairs):
        matches = [
            Match(Category.KEYWORD, 0, 2),
            Match(Category.FUNCTION, 0, 3),
        ]
        assert pairs(build_segments("abc", matches)) == [
            ("keyword", "ab"),
            ("default", "c"),
        ]

    def test_no_candidates(self, pairs):
        assert pairs(build_segments("abc", [])) == [("default", "abc")]
