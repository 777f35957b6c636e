"""
Project-wide constants.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from typing import FrozenSet, Tuple

# ============================================================================
# Query keys
# ============================================================================

TAG_KEY: str = "tag"
INDEX_KEY: str = "index"
TEXT_KEY: str = "text"
CSS_KEY: str = "css"
XPATH_KEY: str = "xpath"

# Tag used when a query does not name one.
WILDCARD_TAG: str = "*"

# Semantic element categories resolved by the driver layer, never literal tags.
META_TAGS: Tuple[str, ...] = (
    "button*",
    "radio",
    "checkbox",
    "textfield",
    "password",
    "filefield",
)

# ============================================================================
# Selector languages and scopes
# ============================================================================

LANGUAGE_CSS: str = "css"
LANGUAGE_XPATH: str = "xpath"
SUPPORTED_LANGUAGES: Tuple[str, ...] = (LANGUAGE_CSS, LANGUAGE_XPATH)

SCOPE_GLOBAL: str = "global"
SCOPE_LOCAL: str = "local"

# ============================================================================
# Diagnostic formatting
# ============================================================================

DEFAULT_TRUNCATE_LENGTH: int = 60
DEFAULT_ELLIPSIS: str = "..."
DEFAULT_LINE_BREAK_REPLACEMENT: str = "  "

# Element attributes shown by the element formatter, in output order.
ELEMENT_ATTRIBUTE_LABELS: Tuple[Tuple[str, str], ...] = (
    ("id", "Id"),
    ("class", "Class"),
    ("name", "Name"),
    ("value", "Value"),
    ("href", "Href"),
    ("src", "Source"),
)

# Attributes whose values may be long free text.
FREE_TEXT_ATTRIBUTES: FrozenSet[str] = frozenset({"value"})
