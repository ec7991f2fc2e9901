"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objkit.selector.model import FragmentKind

ORDERING_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base class for selector construction failures."""


class OrderingError(SelectorError):
    """Raised when fragments are not in element..pseudo-element rank order."""

    def __init__(self, message: str = ORDERING_MESSAGE):
        super().__init__(message)


class DuplicateFragmentError(SelectorError):
    """Raised when a singleton fragment kind is added a second time."""

    def __init__(self, kind: FragmentKind, message: str = DUPLICATE_MESSAGE):
        self.kind = kind
        super().__init__(message)
