from selectorkit.selector.builder import CssSelectorBuilder, css_selector_builder
from selectorkit.selector.errors import DuplicateFragment, OrderViolation, SelectorError
from selectorkit.selector.model import (
    Combinator,
    CombinedSelector,
    Fragment,
    Renderable,
    Selector,
)

__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
    "Selector",
    "CombinedSelector",
    "Combinator",
    "Fragment",
    "Renderable",
    "SelectorError",
    "OrderViolation",
    "DuplicateFragment",
]
