"""
Query data model.

An attribute query is an ordered set of predicates. Each key is classified
once into a PredicateKind and each value into one QueryValue variant, so the
compilers dispatch on structure instead of inspecting raw mapping entries.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

from ..core.constants import (
    CSS_KEY,
    INDEX_KEY,
    SCOPE_GLOBAL,
    SCOPE_LOCAL,
    TAG_KEY,
    TEXT_KEY,
    WILDCARD_TAG,
    XPATH_KEY,
)
from ..core.exceptions import InvalidQueryValueError


class PredicateKind(str, Enum):
    """How a query key takes part in selector construction."""

    TAG = TAG_KEY
    INDEX = INDEX_KEY
    TEXT = TEXT_KEY
    CSS = CSS_KEY
    XPATH = XPATH_KEY
    ATTRIBUTE = "attribute"

    @classmethod
    def for_key(cls, key: str) -> "PredicateKind":
        """Classify a query key; unreserved keys are named attributes."""
        try:
            return cls(key)
        except ValueError:
            return cls.ATTRIBUTE


class Scope(str, Enum):
    """XPath search scope."""

    GLOBAL = SCOPE_GLOBAL
    LOCAL = SCOPE_LOCAL

    @property
    def prefix(self) -> str:
        return "." if self is Scope.LOCAL else ""

    @classmethod
    def coerce(cls, value: Union["Scope", str, None]) -> "Scope":
        if value is None:
            return cls.GLOBAL
        if isinstance(value, cls):
            return value
        name = key_name(value).strip().lower()
        try:
            return cls(name)
        except ValueError:
            raise InvalidQueryValueError(
                f"Unknown scope: {value!r} (expected 'global' or 'local')",
                field="scope",
            ) from None


@dataclass(frozen=True)
class Literal:
    """A plain value matched by equality."""

    value: str


@dataclass(frozen=True)
class Pattern:
    """A regular expression; never expressible as CSS or XPath."""

    regex: "re.Pattern[str]"

    @property
    def value(self) -> str:
        return self.regex.pattern


@dataclass(frozen=True)
class Index:
    """A 0-based position among siblings."""

    position: int

    @property
    def value(self) -> str:
        return str(self.position)


QueryValue = Union[Literal, Pattern, Index]


def symbol_name(value: Any) -> str:
    """Return the symbolic string form of a key or value."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def key_name(key: Any) -> str:
    """Return a query key without the optional leading colon."""
    text = symbol_name(key)
    return text[1:] if text.startswith(":") and len(text) > 1 else text


def _index_value(raw: Any) -> Index:
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise InvalidQueryValueError(
            f"index must be an integer, got {raw!r}", field=INDEX_KEY
        )
    try:
        position = int(raw)
    except (TypeError, ValueError):
        raise InvalidQueryValueError(
            f"index must be an integer, got {raw!r}", field=INDEX_KEY
        ) from None
    if position < 0:
        raise InvalidQueryValueError(
            f"index is 0-based and cannot be negative, got {position}",
            field=INDEX_KEY,
        )
    return Index(position)


def to_query_value(kind: PredicateKind, raw: Any) -> QueryValue:
    """Resolve a raw mapping value into its QueryValue variant."""
    if isinstance(raw, (Literal, Pattern, Index)):
        return raw
    if isinstance(raw, re.Pattern):
        return Pattern(raw)
    if kind is PredicateKind.INDEX:
        return _index_value(raw)
    if raw is None:
        raise InvalidQueryValueError(
            f"Query key {kind.value!r} has no value", field=kind.value
        )
    return Literal(symbol_name(raw))


@dataclass(frozen=True)
class Predicate:
    """One query entry: the attribute name, its kind and its value."""

    name: str
    kind: PredicateKind
    value: QueryValue

    @property
    def is_pattern(self) -> bool:
        return isinstance(self.value, Pattern)


@dataclass(frozen=True)
class AttributeQuery:
    """An ordered attribute-map query, e.g. {"tag": "div", "id": "content"}."""

    predicates: Tuple[Predicate, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Any, Any]]) -> "AttributeQuery":
        predicates = []
        seen = set()
        for raw_key, raw_value in pairs:
            name = key_name(raw_key)
            if not name:
                raise InvalidQueryValueError("Query keys cannot be empty")
            if name in seen:
                raise InvalidQueryValueError(
                    f"Duplicate query key: {name!r}", field=name
                )
            seen.add(name)
            kind = PredicateKind.for_key(name)
            predicates.append(
                Predicate(name=name, kind=kind, value=to_query_value(kind, raw_value))
            )
        return cls(predicates=tuple(predicates))

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> "AttributeQuery":
        return cls.from_pairs(mapping.items())

    def __len__(self) -> int:
        return len(self.predicates)

    def __iter__(self):
        return iter(self.predicates)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, PredicateKind):
            return any(p.kind is key for p in self.predicates)
        return any(p.name == key_name(key) for p in self.predicates)

    def get(self, kind: PredicateKind) -> Optional[Predicate]:
        for predicate in self.predicates:
            if predicate.kind is kind:
                return predicate
        return None

    @property
    def tag(self) -> Optional[QueryValue]:
        predicate = self.get(PredicateKind.TAG)
        return predicate.value if predicate else None

    @property
    def tag_name(self) -> str:
        """Literal tag name, or the wildcard when the query names none."""
        tag = self.tag
        if tag is None:
            return WILDCARD_TAG
        return tag.value

    @property
    def has_pattern(self) -> bool:
        return any(p.is_pattern for p in self.predicates)

    @property
    def all_patterns(self) -> bool:
        return bool(self.predicates) and all(p.is_pattern for p in self.predicates)

    @property
    def override_keys(self) -> Tuple[str, ...]:
        return tuple(
            p.name
            for p in self.predicates
            if p.kind in (PredicateKind.CSS, PredicateKind.XPATH)
        )

    def without(self, *kinds: PredicateKind) -> "AttributeQuery":
        return AttributeQuery(
            tuple(p for p in self.predicates if p.kind not in kinds)
        )

    def without_tag(self) -> "AttributeQuery":
        return self.without(PredicateKind.TAG)

    def literals(self) -> "AttributeQuery":
        return AttributeQuery(tuple(p for p in self.predicates if not p.is_pattern))

    def patterns(self) -> Tuple[Predicate, ...]:
        return tuple(p for p in self.predicates if p.is_pattern)


@dataclass(frozen=True)
class AncestryQuery:
    """Queries in ancestor-to-descendant order."""

    levels: Tuple[AttributeQuery, ...] = ()

    def __len__(self) -> int:
        return len(self.levels)

    def __iter__(self):
        return iter(self.levels)

    @property
    def has_pattern(self) -> bool:
        return any(level.has_pattern for level in self.levels)


QueryLike = Union[AttributeQuery, Mapping[Any, Any]]
AncestryLike = Union[AncestryQuery, Sequence[QueryLike]]


def as_attribute_query(query: Optional[QueryLike]) -> AttributeQuery:
    """Accept an AttributeQuery or any ordered mapping."""
    if query is None:
        return AttributeQuery()
    if isinstance(query, AttributeQuery):
        return query
    if isinstance(query, Mapping):
        return AttributeQuery.from_mapping(query)
    raise TypeError(
        f"Expected a mapping or AttributeQuery, got {type(query).__name__}"
    )


def as_ancestry_query(levels: AncestryLike) -> AncestryQuery:
    """Accept an AncestryQuery or any sequence of queries."""
    if isinstance(levels, AncestryQuery):
        return levels
    if isinstance(levels, (Mapping, AttributeQuery, str, bytes)):
        raise TypeError("Ancestry queries must be a sequence of queries")
    return AncestryQuery(tuple(as_attribute_query(level) for level in levels))
