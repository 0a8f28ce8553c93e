"""Selector model: Fragment positions, the Selector builder, and combinators."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Protocol

from selectorkit.selector.errors import DuplicateFragment, OrderViolation

logger = logging.getLogger(__name__)


class Fragment(IntEnum):
    """A selector fragment kind, valued by its position in a compound selector.

    Positions:
        1 = element, 2 = id, 3 = class, 4 = attribute,
        5 = pseudo-class, 6 = pseudo-element
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


# Fragments that may be set at most once per selector.
UNIQUE_FRAGMENTS = frozenset({Fragment.ELEMENT, Fragment.ID, Fragment.PSEUDO_ELEMENT})

_TEMPLATES: dict[Fragment, str] = {
    Fragment.ELEMENT: "{}",
    Fragment.ID: "#{}",
    Fragment.CLASS: ".{}",
    Fragment.ATTRIBUTE: "[{}]",
    Fragment.PSEUDO_CLASS: ":{}",
    Fragment.PSEUDO_ELEMENT: "::{}",
}


class Renderable(Protocol):
    """Anything that renders to a CSS selector string."""

    def render(self) -> str: ...


class Combinator(Enum):
    """Glyphs that join two selectors into a structural relationship."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


class Selector:
    """A compound selector built fragment by fragment.

    Fragments must be added in position order (element, id, class,
    attribute, pseudo-class, pseudo-element).  Classes, attributes and
    pseudo-classes may repeat; element, id and pseudo-element may not.
    Every fragment method returns the selector itself so calls chain::

        Selector().element("a").attr('href$=".png"').pseudo_class("focus")

    A selector that raised a :class:`SelectorError` must not be reused.
    """

    def __init__(self) -> None:
        self._parts: dict[Fragment, list[str]] = {f: [] for f in Fragment}
        self._position = 0

    @property
    def position(self) -> int:
        """Highest fragment position recorded so far (0 when empty)."""
        return self._position

    # --- fragment methods ---------------------------------------------------

    def element(self, value: str) -> Selector:
        return self._add(Fragment.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._add(Fragment.ID, value)

    def class_(self, value: str) -> Selector:
        return self._add(Fragment.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self._add(Fragment.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self._add(Fragment.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._add(Fragment.PSEUDO_ELEMENT, value)

    def _add(self, fragment: Fragment, value: str) -> Selector:
        if fragment < self._position:
            after = Fragment(self._position)
            logger.debug("Rejected %s after %s", fragment.label, after.label)
            raise OrderViolation(fragment, after)
        if fragment in UNIQUE_FRAGMENTS and self._parts[fragment]:
            logger.debug("Rejected second %s %r", fragment.label, value)
            raise DuplicateFragment(fragment)
        self._parts[fragment].append(value)
        self._position = fragment
        return self

    # --- queries ------------------------------------------------------------

    def fragments(self) -> tuple[tuple[Fragment, str], ...]:
        """Return the recorded fragments as ``(kind, value)`` pairs in render order."""
        return tuple(
            (fragment, value)
            for fragment in Fragment
            for value in self._parts[fragment]
        )

    def render(self) -> str:
        return "".join(
            _TEMPLATES[fragment].format(value) for fragment, value in self.fragments()
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Selector({self.render()!r})"


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator, e.g. ``div > p``.

    Either side may itself be a CombinedSelector, to any depth.
    """

    left: Renderable
    combinator: Combinator
    right: Renderable

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator.value} {self.right.render()}"

    def __str__(self) -> str:
        return self.render()
