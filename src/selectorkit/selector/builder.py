"""Facade for building CSS selectors.

Each entry point starts a fresh :class:`Selector` holding a single fragment;
``combine`` joins two selectors with a combinator.

Example:
    builder = css_selector_builder
    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.combine(builder.element("table").id("data"), "~", builder.element("tr")),
    ).render()
    # => 'div#main + table#data ~ tr'
"""

from __future__ import annotations

from selectorkit.selector.model import Combinator, CombinedSelector, Renderable, Selector

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Entry points for selector construction, one per fragment kind."""

    @staticmethod
    def element(value: str) -> Selector:
        return Selector().element(value)

    @staticmethod
    def id(value: str) -> Selector:
        return Selector().id(value)

    @staticmethod
    def class_(value: str) -> Selector:
        return Selector().class_(value)

    @staticmethod
    def attr(value: str) -> Selector:
        return Selector().attr(value)

    @staticmethod
    def pseudo_class(value: str) -> Selector:
        return Selector().pseudo_class(value)

    @staticmethod
    def pseudo_element(value: str) -> Selector:
        return Selector().pseudo_element(value)

    @staticmethod
    def combine(
        left: Renderable, combinator: Combinator | str, right: Renderable
    ) -> CombinedSelector:
        """Join *left* and *right* with *combinator*.

        *combinator* is a :class:`Combinator` or its glyph (``" "``, ``">"``,
        ``"+"``, ``"~"``).  Any other glyph raises ``ValueError``.
        """
        return CombinedSelector(left=left, combinator=Combinator(combinator), right=right)


css_selector_builder = CssSelectorBuilder()
