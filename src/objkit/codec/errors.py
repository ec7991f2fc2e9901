"""Codec error types."""

from __future__ import annotations


class CodecError(Exception):
    """Raised when JSON data cannot be mapped onto a registered type."""


class UnknownTypeError(CodecError):
    """Raised when a decode target is not in the type registry."""

    def __init__(self, target: object):
        self.target = target
        name = target if isinstance(target, str) else getattr(target, "__name__", target)
        super().__init__(f"No type registered for {name!r}")


class MissingFieldError(CodecError):
    """Raised when JSON data lacks a declared constructor field."""

    def __init__(self, tag: str, field: str):
        self.tag = tag
        self.field = field
        super().__init__(f"{tag}: missing field {field!r}")
