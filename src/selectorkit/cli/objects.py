"""CLI command: selectorkit rect -- describe a rectangle."""

from __future__ import annotations

import logging

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.objects import Rectangle, to_json

logger = logging.getLogger(__name__)


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--area", "area_only", is_flag=True, help="Print only the area.")
@click.pass_obj
def rect(
    config: SelectorKitConfig | None, width: float, height: float, area_only: bool
) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON, or its area with --area."""
    config = config or SelectorKitConfig()
    rectangle = Rectangle(width, height)
    logger.info("Rectangle %sx%s", width, height)
    if area_only:
        click.echo(f"{rectangle.area():g}")
    else:
        click.echo(to_json(rectangle, indent=config.json_indent))
