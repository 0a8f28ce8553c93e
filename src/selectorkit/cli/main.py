"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: SELECTORKIT_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selectorkit - build CSS selectors and run the small object exercises."""
    try:
        config = SelectorKitConfig.from_env()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    level = (log_level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.objects import rect  # noqa: E402
from selectorkit.cli.rot13 import rot13  # noqa: E402

cli.add_command(build)
cli.add_command(rect)
cli.add_command(rot13)
