"""
Shared CLI helpers.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

from typing import Union

import click

from ..core.config import ToolConfig
from ..core.exceptions import QueryParseError
from ..selector.ast import AncestryQuery, AttributeQuery
from ..selector.parser import parse_query


def get_config(ctx: click.Context) -> ToolConfig:
    """Return the config loaded by the group, or defaults when run standalone."""
    obj = ctx.find_object(dict) or {}
    return obj.get("config") or ToolConfig()


def parse_query_argument(text: str) -> Union[AttributeQuery, AncestryQuery]:
    """Parse a QUERY argument, reporting syntax errors as usage errors."""
    try:
        return parse_query(text)
    except QueryParseError as e:
        raise click.BadParameter(e.message, param_hint="QUERY") from e
