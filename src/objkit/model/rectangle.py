"""Rectangle model: a mutable width/height pair with a computed area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle whose area follows its current dimensions."""

    width: float
    height: float

    def get_area(self) -> float:
        """Return width * height, computed on every call."""
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    return Rectangle(width=width, height=height)
