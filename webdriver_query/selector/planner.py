"""
Matching strategy planner.

Decides how a query is resolved against a page:
- OVERRIDE: the query carries a ready-made :css or :xpath selector
- STRUCTURAL: the whole query compiles to one selector
- FILTERED: literal predicates compile to a selector, regex predicates are
  checked afterwards on the candidate elements
- REGEX_SCAN: every predicate is a regex; all elements are candidates

filter_elements() applies the regex part of a plan to the elements returned
for its selector.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

from ..core.constants import LANGUAGE_CSS, LANGUAGE_XPATH, SUPPORTED_LANGUAGES
from ..core.exceptions import IncompatibleQueryError, InvalidQueryValueError
from ..printing.handles import ElementHandle
from .ast import (
    AncestryLike,
    AncestryQuery,
    AttributeQuery,
    Predicate,
    PredicateKind,
    QueryLike,
    Scope,
    as_ancestry_query,
    as_attribute_query,
)
from .compiler import (
    build_css,
    build_css_with_ancestry,
    build_xpath,
    build_xpath_with_ancestry,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=ElementHandle)


class MatchStrategy(str, Enum):
    """How a planned query is resolved."""

    OVERRIDE = "override"
    STRUCTURAL = "structural"
    FILTERED = "filtered"
    REGEX_SCAN = "regex_scan"


@dataclass(frozen=True)
class QueryPlan:
    """Selector to run plus the checks left for the matched elements."""

    strategy: MatchStrategy
    language: str
    selector: str
    patterns: Tuple[Predicate, ...] = ()
    index: Optional[int] = None

    @property
    def needs_filtering(self) -> bool:
        return bool(self.patterns) or self.index is not None


def _language(language: str) -> str:
    name = (language or "").strip().lower()
    if name not in SUPPORTED_LANGUAGES:
        raise InvalidQueryValueError(
            f"Unsupported selector language: {language!r}", field="language"
        )
    return name


def _compile(language: str, tag: str, query: AttributeQuery, scope: Scope) -> str:
    if language == LANGUAGE_CSS:
        return build_css(tag, query)
    return build_xpath(tag, query, scope)


def plan_query(
    query: Union[QueryLike, AncestryLike],
    language: str = LANGUAGE_CSS,
    scope: Union[Scope, str] = Scope.GLOBAL,
) -> QueryPlan:
    """
    Choose the matching strategy for a query.

    Args:
        query: attribute map, AttributeQuery, or an ancestry sequence
        language: "css" or "xpath"
        scope: XPath scope

    Raises:
        IncompatibleQueryError: for an ancestry query holding a regex value,
            or a regex given for :index
    """
    language = _language(language)
    scope = Scope.coerce(scope)

    if isinstance(query, (AncestryQuery, list, tuple)):
        return _plan_ancestry(as_ancestry_query(query), language, scope)

    attrs = as_attribute_query(query)

    override = attrs.get(PredicateKind.CSS) or attrs.get(PredicateKind.XPATH)
    if override is not None:
        if override.is_pattern:
            raise IncompatibleQueryError(
                f"The :{override.name} entry must be a selector string, not a regex"
            )
        logger.debug(f"Using :{override.name} override selector")
        return QueryPlan(
            strategy=MatchStrategy.OVERRIDE,
            language=override.kind.value,
            selector=override.value.value,
        )

    index_predicate = attrs.get(PredicateKind.INDEX)
    if index_predicate is not None and index_predicate.is_pattern:
        raise IncompatibleQueryError("The :index entry cannot be a regex")

    if not attrs.has_pattern:
        return QueryPlan(
            strategy=MatchStrategy.STRUCTURAL,
            language=language,
            selector=_compile(language, attrs.tag_name, attrs, scope),
        )

    # Positions are counted among the filtered elements, so :index moves
    # out of the selector.
    index = index_predicate.value.position if index_predicate is not None else None
    structural = attrs.literals().without(PredicateKind.INDEX)

    if attrs.all_patterns:
        strategy = MatchStrategy.REGEX_SCAN
    else:
        strategy = MatchStrategy.FILTERED

    plan = QueryPlan(
        strategy=strategy,
        language=language,
        selector=_compile(language, structural.tag_name, structural, scope),
        patterns=attrs.patterns(),
        index=index,
    )
    logger.debug(
        f"Planned {plan.strategy.value} query: {plan.selector} "
        f"with {len(plan.patterns)} regex check(s)"
    )
    return plan


def _plan_ancestry(ancestry: AncestryQuery, language: str, scope: Scope) -> QueryPlan:
    if ancestry.has_pattern:
        raise IncompatibleQueryError(
            "Hierarchical queries cannot contain regex values; "
            "query the innermost level with a regex scan instead"
        )
    if language == LANGUAGE_XPATH:
        selector = build_xpath_with_ancestry(ancestry, scope)
    else:
        selector = build_css_with_ancestry(ancestry)
    return QueryPlan(
        strategy=MatchStrategy.STRUCTURAL, language=language, selector=selector
    )


def _element_value(element: ElementHandle, predicate: Predicate) -> Optional[str]:
    if predicate.kind is PredicateKind.TAG:
        return element.tag_name()
    if predicate.kind is PredicateKind.TEXT:
        return element.text()
    return element.attribute(predicate.name)


def matches_patterns(element: ElementHandle, patterns: Sequence[Predicate]) -> bool:
    """Check that every regex predicate finds a match on the element."""
    for predicate in patterns:
        value = _element_value(element, predicate)
        if value is None or not predicate.value.regex.search(value):
            return False
    return True


def filter_elements(elements: Iterable[E], plan: QueryPlan) -> List[E]:
    """
    Apply the regex checks and the deferred index of a plan.

    An index past the end of the filtered elements yields an empty list.
    """
    matched = [el for el in elements if matches_patterns(el, plan.patterns)]
    if plan.index is None:
        return matched
    if plan.index >= len(matched):
        return []
    return [matched[plan.index]]

