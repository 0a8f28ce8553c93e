"""CLI command: selectorkit build -- render a compound selector from options."""

from __future__ import annotations

import logging
from typing import Any, Callable

import click

from selectorkit.selector import Fragment, Selector, SelectorError, css_selector_builder

logger = logging.getLogger(__name__)

_FRAGMENTS_KEY = "selectorkit.fragments"

# Builder/selector method name for each fragment kind.
_METHODS: dict[Fragment, str] = {
    Fragment.ELEMENT: "element",
    Fragment.ID: "id",
    Fragment.CLASS: "class_",
    Fragment.ATTRIBUTE: "attr",
    Fragment.PSEUDO_CLASS: "pseudo_class",
    Fragment.PSEUDO_ELEMENT: "pseudo_element",
}


def _collect(fragment: Fragment) -> Callable[[click.Context, click.Parameter, Any], Any]:
    """Option callback recording ``(fragment, value)`` pairs in command-line order."""

    def callback(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
        if value is None or value == ():
            return value
        values = value if isinstance(value, tuple) else (value,)
        ctx.meta.setdefault(_FRAGMENTS_KEY, []).extend((fragment, v) for v in values)
        return value

    return callback


@click.command()
@click.option("--element", callback=_collect(Fragment.ELEMENT), expose_value=False, help="Element (type) selector.")
@click.option("--id", callback=_collect(Fragment.ID), expose_value=False, help="Id selector, without '#'.")
@click.option("--class", multiple=True, callback=_collect(Fragment.CLASS), expose_value=False, help="Class, without '.'; repeatable.")
@click.option("--attr", multiple=True, callback=_collect(Fragment.ATTRIBUTE), expose_value=False, help="Attribute condition, without brackets; repeatable.")
@click.option("--pseudo-class", multiple=True, callback=_collect(Fragment.PSEUDO_CLASS), expose_value=False, help="Pseudo-class, without ':'; repeatable.")
@click.option("--pseudo-element", callback=_collect(Fragment.PSEUDO_ELEMENT), expose_value=False, help="Pseudo-element, without '::'.")
@click.pass_context
def build(ctx: click.Context) -> None:
    """Build a compound selector and print it.

    Fragments are applied in the order their options first appear, so they
    must follow element, id, class, attribute, pseudo-class, pseudo-element.
    """
    pairs: list[tuple[Fragment, str]] = ctx.meta.get(_FRAGMENTS_KEY, [])
    if not pairs:
        raise click.UsageError("Give at least one selector fragment option.")

    (first_kind, first_value), rest = pairs[0], pairs[1:]
    try:
        selector: Selector = getattr(css_selector_builder, _METHODS[first_kind])(first_value)
        for kind, value in rest:
            getattr(selector, _METHODS[kind])(value)
    except SelectorError as exc:
        raise click.ClickException(str(exc)) from exc

    logger.info("Built selector with %d fragment(s)", len(pairs))
    click.echo(selector.render())
