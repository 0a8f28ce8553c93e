"""selectorkit: CSS selector builder with ordering validation, plus small object exercises."""

from selectorkit.objects import Rectangle, from_json, to_json
from selectorkit.rot13 import encode_rot13
from selectorkit.selector import (
    Combinator,
    CombinedSelector,
    CssSelectorBuilder,
    DuplicateFragment,
    Fragment,
    OrderViolation,
    Selector,
    SelectorError,
    css_selector_builder,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "css_selector_builder",
    "CssSelectorBuilder",
    "Selector",
    "CombinedSelector",
    "Combinator",
    "Fragment",
    "SelectorError",
    "OrderViolation",
    "DuplicateFragment",
    "Rectangle",
    "to_json",
    "from_json",
    "encode_rot13",
]
