"""objkit: rectangle model, typed JSON codec and CSS selector builder."""

__version__ = "0.1.0"
