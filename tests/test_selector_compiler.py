"""
Tests for the single-query CSS and XPath builders.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import re
from enum import Enum

import pytest

from webdriver_query.core.exceptions import (
    IncompatibleQueryError,
    InvalidQueryValueError,
    UnsupportedPredicateError,
)
from webdriver_query.selector import (
    AttributeQuery,
    Scope,
    build_css,
    build_css_attrs,
    build_xpath,
    build_xpath_attrs,
)


class Color(Enum):
    RED = "red"


class TestBuildCss:
    """CSS builder."""

    def test_tag_and_attribute(self):
        assert build_css("div", {"id": "content"}) == "div[id='content']"

    def test_index_is_translated_to_nth_child(self):
        assert build_css("a", {"index": 2}) == "a:nth-child(3)"
        assert build_css("li", {"index": 0}) == "li:nth-child(1)"

    def test_tag_entry_is_not_an_attribute(self):
        query = {"tag": "div", "id": "content", "class": "main"}
        assert build_css("div", query) == "div[id='content'][class='main']"

    def test_empty_map_yields_bare_tag(self):
        assert build_css("a", {}) == "a"
        assert build_css("a", {"tag": "a"}) == "a"

    def test_missing_tag_is_wildcard(self):
        assert build_css(None, {"id": "x"}) == "*[id='x']"

    def test_predicates_keep_map_order(self):
        assert (
            build_css("input", {"name": "q", "type": "text", "index": 1})
            == "input[name='q'][type='text']:nth-child(2)"
        )

    def test_text_is_rejected(self):
        with pytest.raises(UnsupportedPredicateError) as exc_info:
            build_css("a", {"text": "Click"})
        assert exc_info.value.predicate == "text"
        assert isinstance(exc_info.value, ValueError)

    def test_regex_value_returns_none(self):
        assert build_css("div", {"id": re.compile("^foo")}) is None

    def test_regex_wins_over_text_rejection(self):
        assert build_css("a", {"text": "x", "id": re.compile("y")}) is None

    def test_regex_tag_argument_returns_none(self):
        assert build_css(re.compile("d.v"), {"id": "x"}) is None

    def test_colon_prefixed_keys(self):
        assert build_css("div", {":id": "content"}) == "div[id='content']"

    def test_value_coercion(self):
        assert build_css("div", {"class": Color.RED}) == "div[class='red']"
        assert build_css("div", {"tabindex": 3}) == "div[tabindex='3']"

    def test_quotes_in_value_are_escaped(self):
        assert build_css("a", {"title": "it's"}) == "a[title='it\\'s']"
        assert build_css("a", {"title": "back\\slash"}) == "a[title='back\\\\slash']"

    def test_line_breaks_in_value_are_escaped(self):
        assert build_css("a", {"title": "line1\nline2"}) == "a[title='line1\\a line2']"
        assert build_css("a", {"title": "a\r\nb"}) == "a[title='a\\d \\a b']"
        assert build_css("a", {"title": "a\fb"}) == "a[title='a\\c b']"
        assert build_css("a", {"title": "a\0b"}) == "a[title='a\\fffd b']"

    def test_float_index_rejected(self):
        with pytest.raises(InvalidQueryValueError):
            build_css("a", {"index": 2.7})

    def test_regex_checked_before_text(self):
        with pytest.raises(IncompatibleQueryError):
            build_css_attrs({"text": "x", "id": re.compile("y")})

    def test_accepts_attribute_query(self):
        query = AttributeQuery.from_mapping({"tag": "div", "id": "content"})
        assert build_css("div", query) == "div[id='content']"

    def test_same_map_compiles_identically(self):
        query = {"tag": "a", "class": "external", "rel": "nofollow", "index": 4}
        assert build_css("a", query) == build_css("a", query)


class TestBuildCssAttrs:
    """CSS attribute portion."""

    def test_attributes_and_index(self):
        assert build_css_attrs({"id": "a", "index": 0}) == "[id='a']:nth-child(1)"

    def test_empty(self):
        assert build_css_attrs({}) == ""

    def test_text_raises(self):
        with pytest.raises(UnsupportedPredicateError):
            build_css_attrs({"id": "a", "text": "b"})

    def test_regex_raises(self):
        with pytest.raises(IncompatibleQueryError) as exc_info:
            build_css_attrs({"id": re.compile("a")})
        assert exc_info.value.details["attribute"] == "id"


class TestBuildXpath:
    """XPath builder."""

    def test_tag_and_attribute(self):
        assert build_xpath("div", {"id": "content"}) == "//div[@id='content']"

    def test_text_predicate(self):
        assert build_xpath("a", {"text": "Click"}) == '//a[text()="Click"]'

    def test_local_scope(self):
        assert build_xpath("a", {}, "local") == ".//a"
        assert build_xpath("a", {}, Scope.LOCAL) == ".//a"

    def test_global_scope_is_default(self):
        assert build_xpath("a", {}) == "//a"
        assert build_xpath("a", {}, "global") == "//a"

    def test_index_is_one_based(self):
        assert build_xpath("li", {"index": 0}) == "//li[1]"

    def test_mixed_predicates_keep_order(self):
        assert (
            build_xpath("a", {"class": "x", "text": "Go", "index": 1})
            == '//a[@class=\'x\'][text()="Go"][2]'
        )

    def test_missing_tag_keeps_scope(self):
        assert build_xpath(None, {"id": "x"}) == "//*[@id='x']"
        assert build_xpath(None, {"id": "x"}, "local") == ".//*[@id='x']"

    def test_regex_returns_none(self):
        assert build_xpath("div", {"class": re.compile("nav")}) is None

    def test_unknown_scope(self):
        with pytest.raises(InvalidQueryValueError):
            build_xpath("a", {}, "nearby")

    def test_value_quoting(self):
        assert build_xpath("a", {"title": "it's"}) == "//a[@title=\"it's\"]"
        assert build_xpath("p", {"text": 'say "hi"'}) == "//p[text()='say \"hi\"']"

    def test_value_with_both_quotes_uses_concat(self):
        assert (
            build_xpath("a", {"title": "a'b\"c"})
            == "//a[@title=concat('a', \"'\", 'b\"c')]"
        )


class TestBuildXpathAttrs:
    """XPath predicate portion."""

    def test_tag_is_skipped(self):
        assert build_xpath_attrs({"tag": "a", "id": "x"}) == "[@id='x']"

    def test_numbers_use_symbolic_form(self):
        assert build_xpath_attrs({"size": 10}) == "[@size='10']"

    def test_regex_raises(self):
        with pytest.raises(IncompatibleQueryError):
            build_xpath_attrs({"id": re.compile("x")})
