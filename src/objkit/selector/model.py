"""Selector model: FragmentKind enum and Fragment dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """Kinds of selector fragment, in the order they must appear.

    Ranks:
        0 = element (div)
        1 = id (#main)
        2 = class (.container)
        3 = attribute ([href])
        4 = pseudo-class (:focus)
        5 = pseudo-element (::before)
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def singleton(self) -> bool:
        """True if the kind may occur at most once in a selector."""
        return self in _SINGLETONS


_RANKS: dict[FragmentKind, int] = {kind: i for i, kind in enumerate(FragmentKind)}

_SINGLETONS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


@dataclass(frozen=True)
class Fragment:
    """One typed, pre-rendered piece of a selector."""

    kind: FragmentKind
    text: str  # "div", "#main", ".container", "[href]", ":focus", "::before"
