from objkit.selector.builder import SelectorBuilder, css_selector_builder
from objkit.selector.errors import DuplicateFragmentError, OrderingError, SelectorError
from objkit.selector.model import Fragment, FragmentKind

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "Fragment",
    "FragmentKind",
    "SelectorError",
    "OrderingError",
    "DuplicateFragmentError",
]
