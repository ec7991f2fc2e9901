"""Immutable, append-only CSS selector builder.

Usage:
    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")
    css_selector_builder.combine(
        css_selector_builder.element("div"), "+", css_selector_builder.element("span")
    )
"""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass

from objkit.selector.errors import DuplicateFragmentError, OrderingError
from objkit.selector.model import Fragment, FragmentKind

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


def _check_order(fragments: tuple[Fragment, ...]) -> None:
    """Raise OrderingError if any fragment outranks the one after it."""
    for prev, curr in zip(fragments, fragments[1:]):
        if prev.kind.rank > curr.kind.rank:
            logger.debug(
                "Rejected selector: %s fragment %r after %s fragment %r",
                curr.kind.value,
                curr.text,
                prev.kind.value,
                prev.text,
            )
            raise OrderingError()


@dataclass(frozen=True)
class SelectorBuilder:
    """A persistent selector value; every adding call returns a new builder.

    ``validate`` controls whether fragment rank order is checked at
    construction; only ``combine`` passes False.
    """

    fragments: tuple[Fragment, ...]
    validate: InitVar[bool]

    def __post_init__(self, validate: bool) -> None:
        if validate:
            _check_order(self.fragments)

    # --- fragments --------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ID, f"#{value}")

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, f".{value}")

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ATTRIBUTE, f"[{value}]")

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_ELEMENT, f"::{value}")

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with a combinator token such as " ", "+", "~" or ">".

        The joined sequence is not rank-validated: each side is a complete
        selector on its own.
        """
        joint = Fragment(FragmentKind.ELEMENT, f" {combinator} ")
        return SelectorBuilder(
            self.fragments + left.fragments + (joint,) + right.fragments,
            validate=False,
        )

    # --- output -----------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text."""
        return "".join(fragment.text for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()

    def contains(self, kind: FragmentKind) -> bool:
        """True if a fragment of *kind* is already present."""
        return any(fragment.kind is kind for fragment in self.fragments)

    def _append(self, kind: FragmentKind, text: str) -> SelectorBuilder:
        if kind.singleton and self.contains(kind):
            logger.debug("Rejected duplicate %s fragment %r", kind.value, text)
            raise DuplicateFragmentError(kind)
        return SelectorBuilder(self.fragments + (Fragment(kind, text),), validate=True)


css_selector_builder = SelectorBuilder((), validate=True)
