"""
CLI commands: css, xpath.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

import logging
from typing import Optional

import click

from ..core.exceptions import SelectorError
from ..selector.ast import AncestryQuery
from ..selector.compiler import (
    build_css,
    build_css_with_ancestry,
    build_xpath,
    build_xpath_with_ancestry,
)
from .context import get_config, parse_query_argument

logger = logging.getLogger(__name__)

_REGEX_HINT = (
    "Query contains a regex value and has no {language} form; "
    "run 'wdquery inspect' to see how it is matched"
)


@click.command(name="css")
@click.argument("query")
def css(query: str) -> None:
    """Print the CSS selector for QUERY, e.g. '{:tag :div, :id "content"}'."""
    parsed = parse_query_argument(query)
    try:
        if isinstance(parsed, AncestryQuery):
            selector = build_css_with_ancestry(parsed)
        else:
            selector = build_css(parsed.tag_name, parsed)
    except SelectorError as e:
        raise click.ClickException(e.message) from e

    if selector is None:
        raise click.ClickException(_REGEX_HINT.format(language="CSS"))
    logger.debug(f"Compiled CSS: {selector}")
    click.echo(selector)


@click.command(name="xpath")
@click.argument("query")
@click.option(
    "--scope",
    "-s",
    type=click.Choice(["global", "local"]),
    default=None,
    help="global: search the whole document; local: relative to the context node",
)
@click.pass_context
def xpath(ctx: click.Context, query: str, scope: Optional[str]) -> None:
    """Print the XPath for QUERY; a vector of maps builds an ancestry path."""
    scope = scope or get_config(ctx).compiler.default_scope
    parsed = parse_query_argument(query)
    try:
        if isinstance(parsed, AncestryQuery):
            selector = build_xpath_with_ancestry(parsed, scope)
        else:
            selector = build_xpath(parsed.tag_name, parsed, scope)
    except SelectorError as e:
        raise click.ClickException(e.message) from e

    if selector is None:
        raise click.ClickException(_REGEX_HINT.format(language="XPath"))
    logger.debug(f"Compiled XPath: {selector}")
    click.echo(selector)
