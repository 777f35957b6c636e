"""
Tests for the query notation parser.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from webdriver_query.core.exceptions import QueryParseError
from webdriver_query.selector import (
    AncestryQuery,
    AttributeQuery,
    Index,
    Literal,
    PredicateKind,
    build_css,
    build_xpath_with_ancestry,
    contains_regex,
    parse_ancestry_query,
    parse_attribute_query,
    parse_query,
)


def test_parse_map() -> None:
    q = parse_query('{:tag :div, :id "content"}')
    assert isinstance(q, AttributeQuery)
    assert q.tag_name == "div"
    assert q.predicates[1].name == "id"
    assert q.predicates[1].value == Literal("content")
    assert build_css(q.tag_name, q) == "div[id='content']"


def test_parse_integer_index() -> None:
    q = parse_query("{:tag :a :index 2}")
    assert q.get(PredicateKind.INDEX).value == Index(2)
    assert build_css(q.tag_name, q) == "a:nth-child(3)"


def test_parse_regex_literal() -> None:
    q = parse_query('{:id #"^foo"}')
    assert contains_regex(q)
    assert q.predicates[0].value.regex.pattern == "^foo"


def test_regex_literal_keeps_backslashes() -> None:
    q = parse_query('{:id #"\\d+\\.x"}')
    regex = q.predicates[0].value.regex
    assert regex.pattern == "\\d+\\.x"
    assert regex.search("item-42.x")


def test_parse_vector_of_maps() -> None:
    q = parse_query('[{:tag :div :id "content"} {:tag :a, :class "external"}]')
    assert isinstance(q, AncestryQuery)
    assert len(q) == 2
    assert (
        build_xpath_with_ancestry(q) == "//div[@id='content']//a[@class='external']"
    )


def test_string_escapes() -> None:
    q = parse_query('{:title "say \\"hi\\"\\n"}')
    assert q.predicates[0].value.value == 'say "hi"\n'


def test_unicode_strings() -> None:
    q = parse_query('{:title "café \\u00e9"}')
    assert q.predicates[0].value.value == "café é"


def test_meta_tag_keyword() -> None:
    assert parse_query("{:tag :button*}").tag_name == "button*"


def test_empty_forms() -> None:
    assert len(parse_query("{}")) == 0
    assert len(parse_query("[]")) == 0


@pytest.mark.parametrize(
    "text",
    [
        "{:tag :div",
        '{:id "a" :id "b"}',
        "{:index -1}",
        '{:id #"("}',
        "{tag div}",
        '{:id "a"} extra',
        "",
    ],
)
def test_invalid_input(text: str) -> None:
    with pytest.raises(QueryParseError):
        parse_query(text)


def test_parse_attribute_query_rejects_vector() -> None:
    with pytest.raises(QueryParseError):
        parse_attribute_query("[{:tag :a}]")


def test_parse_ancestry_query_wraps_map() -> None:
    q = parse_ancestry_query("{:tag :a}")
    assert isinstance(q, AncestryQuery)
    assert q.levels[0].tag_name == "a"
