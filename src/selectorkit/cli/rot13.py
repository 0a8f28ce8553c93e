"""CLI command: selectorkit rot13 -- print a ROT13-encoded message."""

from __future__ import annotations

import logging

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.rot13 import encode_rot13

logger = logging.getLogger(__name__)


@click.command()
@click.argument("text", required=False)
@click.pass_obj
def rot13(config: SelectorKitConfig | None, text: str | None) -> None:
    """Encode TEXT with ROT13 (default: the configured message)."""
    if text is None:
        text = (config or SelectorKitConfig()).rot13_message
        logger.info("Encoding configured message")
    else:
        logger.info("Encoding %d character(s)", len(text))
    click.echo(encode_rot13(text))
