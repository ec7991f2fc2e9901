"""JSON codec with an explicit type registry."""

from objkit.codec.errors import CodecError, MissingFieldError, UnknownTypeError
from objkit.codec.json_codec import from_json_text, to_json_text
from objkit.codec.registry import Registration, TypeRegistry, default_registry

__all__ = [
    "to_json_text",
    "from_json_text",
    "Registration",
    "TypeRegistry",
    "default_registry",
    "CodecError",
    "UnknownTypeError",
    "MissingFieldError",
]
