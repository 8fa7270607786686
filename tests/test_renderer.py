"""Tests for rendering segments as HTML or terminal text."""

import pytest

from sqlcolor import DEFAULT_RENDER_OPTIONS, Category, highlight, render_segments
from sqlcolor.core.models import Segment
from sqlcolor.core.renderer import resolve_options


MAGENTA = '\x1b[35m'
RED = '\x1b[31m'
GREEN = '\x1b[32m'
YELLOW = '\x1b[33m'
CLEAR = '\x1b[0m'


class TestTerminalOutput:

    def test_default_colors(self):
        assert highlight("SELECT 1") == f"{MAGENTA}SELECT{CLEAR} {GREEN}1{CLEAR}"

    def test_function_and_brackets(self):
        assert highlight("max(x)") == f"{RED}max{CLEAR}{YELLOW}({CLEAR}x{YELLOW}){CLEAR}"

    def test_default_text_passes_through(self):
        assert highlight("just some words") == "just some words"

    def test_no_escaping_outside_html(self):
        assert highlight("'<'") == f"{GREEN}'<'{CLEAR}"

    def test_line_break_has_no_color(self):
        assert highlight("a\nb") == f"a\n{CLEAR}b"

    def test_empty_input(self):
        assert highlight("") == ""


class TestHtmlOutput:

    def test_escaped_and_wrapped(self):
        assert highlight("SELECT '<b>'", html_mode=True) == (
            '<span class="sql-hl-keyword">SELECT</span> '
            '<span class="sql-hl-string">&#39;&lt;b&gt;&#39;</span>'
        )

    def test_default_text_is_not_escaped(self):
        # Only classified segments go through the escaper
        assert highlight("a&b", html_mode=True) == "a&b"

    def test_class_prefix(self):
        assert highlight("(", {"html_mode": True, "class_prefix": "x-"}) == (
            '<span class="x-bracket">(</span>'
        )

    def test_camel_case_option_names(self):
        assert highlight("(", {"htmlMode": True, "classPrefix": "x-"}) == (
            '<span class="x-bracket">(</span>'
        )
        assert highlight("(", {"html": True}) == '<span class="sql-hl-bracket">(</span>'

    def test_custom_escaper(self):
        assert highlight("'a'", html_mode=True, escaper=str.upper) == (
            '<span class="sql-hl-string">\'A\'</span>'
        )

    def test_line_break_span(self):
        assert highlight("a\nb", html_mode=True) == (
            'a<span class="sql-hl-whitespace">\n</span>b'
        )


class TestOptions:

    def test_partial_colors_keep_other_defaults(self):
        assert highlight("SELECT 1", colors={"keyword": "K"}) == (
            f"KSELECT{CLEAR} {GREEN}1{CLEAR}"
        )

    def test_colors_by_category_member(self):
        assert highlight("1 + 2", colors={Category.SPECIAL: "S"}) == (
            f"1 S+{CLEAR} {GREEN}2{CLEAR}"
        )

    def test_clear_inside_colors(self):
        assert highlight("SELECT 1", colors={"clear": "C"}) == f"{MAGENTA}SELECTC {GREEN}1C"

    def test_clear_code_option_wins_over_colors_clear(self):
        options = resolve_options({"colors": {"clear": "A"}, "clear_code": "B"})
        assert options.clear_code == "B"

    def test_unknown_options_ignored(self):
        assert highlight("SELECT", {"bogus": 1}, colors={"nope": "X"}) == (
            f"{MAGENTA}SELECT{CLEAR}"
        )

    def test_none_values_fall_back(self):
        assert highlight("SELECT", {"colors": None, "class_prefix": None}) == (
            f"{MAGENTA}SELECT{CLEAR}"
        )

    def test_keyword_overrides_apply_over_mapping(self):
        options = resolve_options({"html_mode": False, "class_prefix": "a-"}, class_prefix="b-")
        assert options.class_prefix == "b-"

    def test_render_options_instance(self):
        options = resolve_options(DEFAULT_RENDER_OPTIONS, html_mode=True)
        assert options.html_mode is True
        assert highlight(")", options) == '<span class="sql-hl-bracket">)</span>'

    def test_defaults_are_not_mutated(self):
        highlight("SELECT 1", html_mode=True, class_prefix="z-", colors={"keyword": "K"})
        assert DEFAULT_RENDER_OPTIONS.html_mode is False
        assert DEFAULT_RENDER_OPTIONS.class_prefix == "sql-hl-"
        assert DEFAULT_RENDER_OPTIONS.colors[Category.KEYWORD] == MAGENTA
        with pytest.raises(TypeError):
            DEFAULT_RENDER_OPTIONS.colors[Category.KEYWORD] = "X"

    def test_repeated_calls_are_identical(self):
        sql = "SELECT name, count(*) FROM t WHERE x = 'a\\'b' GROUP BY name;\n"
        assert highlight(sql) == highlight(sql)
        assert highlight(sql, html_mode=True) == highlight(sql, html_mode=True)


class TestRenderSegments:

    def test_precomputed_segments(self):
        segments = [
            Segment(Category.KEYWORD, "FROM"),
            Segment(Category.DEFAULT, " t"),
        ]
        assert render_segments(segments, html_mode=True) == (
            '<span class="sql-hl-keyword">FROM</span> t'
        )
