"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import Fragment


ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for all selector construction errors."""

    def __init__(self, message: str, fragment: Fragment) -> None:
        super().__init__(message)
        self.fragment = fragment


class OrderViolation(SelectorError):
    """A fragment was added after a fragment that must come later."""

    def __init__(self, fragment: Fragment, after: Fragment) -> None:
        super().__init__(ORDER_MESSAGE, fragment)
        self.after = after


class DuplicateFragment(SelectorError):
    """Element, id or pseudo-element was set twice on the same selector."""

    def __init__(self, fragment: Fragment) -> None:
        super().__init__(DUPLICATE_MESSAGE, fragment)
