"""
Main CLI entry point for the query tool.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..core.config import load_config
from ..core.exceptions import ConfigurationError
from ..logging import configure_logging
from .inspect_cli import inspect
from .selector_cli import css, xpath


@click.group()
@click.version_option(version=__version__, prog_name="wdquery")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a JSON configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], log_level: Optional[str]) -> None:
    """Build CSS and XPath selectors from attribute-map queries."""
    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        raise click.ClickException(e.message) from e

    configure_logging(log_level or config.logging.level)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


cli.add_command(css)
cli.add_command(xpath)
cli.add_command(inspect)


if __name__ == "__main__":
    cli()
