"""
CLI command: inspect.

Reports regex detection and the planned matching strategy for a query.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

import json
from typing import Any, Dict, Optional

import click

from ..core.exceptions import IncompatibleQueryError, SelectorError
from ..selector.ast import AncestryQuery
from ..selector.compiler import (
    all_regex,
    contains_regex,
    query_with_ancestry_has_regex,
)
from ..selector.planner import plan_query
from .context import get_config, parse_query_argument


def _report(parsed, language: str, scope: str) -> Dict[str, Any]:
    if isinstance(parsed, AncestryQuery):
        report: Dict[str, Any] = {
            "kind": "ancestry",
            "levels": len(parsed),
            "contains_regex": query_with_ancestry_has_regex(parsed),
            "all_regex": False,
        }
    else:
        report = {
            "kind": "query",
            "levels": 1,
            "contains_regex": contains_regex(parsed),
            "all_regex": all_regex(parsed),
        }

    try:
        plan = plan_query(parsed, language=language, scope=scope)
    except IncompatibleQueryError as e:
        report.update(strategy=None, language=language, selector=None, error=e.message)
        return report

    report.update(
        strategy=plan.strategy.value,
        language=plan.language,
        selector=plan.selector,
        patterns=[
            {"attribute": p.name, "pattern": p.value.value} for p in plan.patterns
        ],
        index=plan.index,
    )
    return report


@click.command(name="inspect")
@click.argument("query")
@click.option(
    "--language",
    "-l",
    type=click.Choice(["css", "xpath"]),
    default=None,
    help="Selector language for the structural part",
)
@click.option(
    "--scope",
    "-s",
    type=click.Choice(["global", "local"]),
    default=None,
    help="XPath scope",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.pass_context
def inspect(
    ctx: click.Context,
    query: str,
    language: Optional[str],
    scope: Optional[str],
    format: str,
) -> None:
    """Show regex detection and the matching strategy for QUERY."""
    config = get_config(ctx)
    language = language or config.compiler.default_language
    scope = scope or config.compiler.default_scope
    parsed = parse_query_argument(query)

    try:
        report = _report(parsed, language, scope)
    except SelectorError as e:
        raise click.ClickException(e.message) from e

    if format == "json":
        click.echo(json.dumps(report, indent=2))
        return

    click.echo(f"Kind: {report['kind']} ({report['levels']} level(s))")
    click.echo(f"Contains regex: {_yes_no(report['contains_regex'])}")
    click.echo(f"All regex: {_yes_no(report['all_regex'])}")
    if report["strategy"] is None:
        click.echo(f"Strategy: none ({report['error']})")
        return
    click.echo(f"Strategy: {report['strategy']}")
    click.echo(f"Selector ({report['language']}): {report['selector']}")
    for pattern in report["patterns"]:
        click.echo(f"  Regex check: {pattern['attribute']} =~ {pattern['pattern']}")
    if report["index"] is not None:
        click.echo(f"  Index after filtering: {report['index']}")


def _yes_no(value: Optional[bool]) -> str:
    return "yes" if value else "no"
