"""
Query notation parser (Lark).

Queries are written the way the driver's users write them in Clojure:

    {:tag :div, :id "content", :index 2}
    {:tag :a, :class #"^ext"}
    [{:tag :div, :id "content"} {:tag :a, :class "external"}]

Supported values:
- keywords (`:name`), which stand for their name
- double-quoted strings with backslash escapes (\\n, \\t, \\r, \\", \\\\, \\uXXXX)
- integers
- regex literals `#"..."`, compiled with `re.compile`

Commas are whitespace. A map parses to AttributeQuery, a vector of maps to
AncestryQuery.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import re
from typing import Any, Union

from lark import Lark, Token, Transformer, UnexpectedInput
from lark.exceptions import VisitError

from ..core.exceptions import QueryParseError, SelectorError
from .ast import AncestryQuery, AttributeQuery


_GRAMMAR = r"""
?start: ancestry
      | query

ancestry: "[" query* "]"
query: "{" entry* "}"
entry: KEYWORD value

?value: KEYWORD -> keyword_value
      | STRING -> string_value
      | REGEX -> regex_value
      | SIGNED_INT -> int_value

KEYWORD: /:[^\s,{}\[\]"#:]+/
STRING: /"(\\.|[^"\\])*"/
REGEX: /#"(\\.|[^"\\])*"/

%import common.SIGNED_INT
%ignore /[\s,]+/
"""


_parser = Lark(_GRAMMAR, parser="lalr", start="start")

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}
_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)


def _unescape(body: str) -> str:
    def repl(m: "re.Match[str]") -> str:
        seq = m.group(1)
        if len(seq) == 5 and seq[0] == "u":
            return chr(int(seq[1:], 16))
        return _ESCAPES.get(seq, seq)

    return _ESCAPE_RE.sub(repl, body)


class _ToAst(Transformer):
    def KEYWORD(self, t: Token) -> str:  # noqa: N802
        return str(t)[1:]

    def STRING(self, t: Token) -> str:  # noqa: N802
        return _unescape(str(t)[1:-1])

    def REGEX(self, t: Token) -> "re.Pattern[str]":  # noqa: N802
        # Regex literals keep backslashes; only the quote escape is resolved.
        body = str(t)[2:-1].replace('\\"', '"')
        try:
            return re.compile(body)
        except re.error as e:
            raise QueryParseError(f"Invalid regex #{str(t)[1:]}: {e}") from e

    def SIGNED_INT(self, t: Token) -> int:  # noqa: N802
        return int(str(t))

    def keyword_value(self, items: list[Any]) -> str:
        return items[0]

    def string_value(self, items: list[Any]) -> str:
        return items[0]

    def regex_value(self, items: list[Any]) -> "re.Pattern[str]":
        return items[0]

    def int_value(self, items: list[Any]) -> int:
        return items[0]

    def entry(self, items: list[Any]) -> tuple[str, Any]:
        return items[0], items[1]

    def query(self, items: list[Any]) -> AttributeQuery:
        try:
            return AttributeQuery.from_pairs(items)
        except SelectorError as e:
            raise QueryParseError(f"Invalid query: {e.message}") from e

    def ancestry(self, items: list[Any]) -> AncestryQuery:
        return AncestryQuery(levels=tuple(items))


def parse_query(text: str) -> Union[AttributeQuery, AncestryQuery]:
    """
    Parse a map or a vector of maps.

    Raises:
        QueryParseError
    """
    try:
        tree = _parser.parse(text)
        return _ToAst().transform(tree)
    except UnexpectedInput as e:
        raise QueryParseError(f"Invalid query: {e}") from e
    except VisitError as e:
        if isinstance(e.orig_exc, SelectorError):
            raise e.orig_exc from None
        raise


def parse_attribute_query(text: str) -> AttributeQuery:
    """Parse a single map, e.g. {:tag :div, :id "content"}."""
    parsed = parse_query(text)
    if not isinstance(parsed, AttributeQuery):
        raise QueryParseError("Expected a single query map, got a vector")
    return parsed


def parse_ancestry_query(text: str) -> AncestryQuery:
    """Parse a vector of maps; a bare map becomes a one-level ancestry."""
    parsed = parse_query(text)
    if isinstance(parsed, AttributeQuery):
        return AncestryQuery(levels=(parsed,))
    return parsed
