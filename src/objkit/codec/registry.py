"""Type registry mapping tags to constructors with a declared field order."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any

from objkit.codec.errors import CodecError, MissingFieldError, UnknownTypeError

__all__ = ["Registration", "TypeRegistry", "default_registry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Registration:
    """A constructor and the fixed order of its parameters."""

    tag: str
    cls: type
    fields: tuple[str, ...]

    def build(self, data: Any) -> Any:
        """Construct ``cls`` from a decoded JSON object or array.

        Objects are read by field name, arrays by position; either way the
        values reach the constructor in declared field order.
        """
        if isinstance(data, dict):
            args = []
            for name in self.fields:
                if name not in data:
                    raise MissingFieldError(self.tag, name)
                args.append(data[name])
            return self.cls(*args)
        if isinstance(data, list):
            if len(data) < len(self.fields):
                raise MissingFieldError(self.tag, self.fields[len(data)])
            if len(data) > len(self.fields):
                raise CodecError(
                    f"{self.tag}: expected {len(self.fields)} values, got {len(data)}"
                )
            return self.cls(*data)
        raise CodecError(
            f"{self.tag}: expected a JSON object or array, got {type(data).__name__}"
        )


class TypeRegistry:
    """Maps type tags (and their classes) to registrations."""

    def __init__(self) -> None:
        self._by_tag: dict[str, Registration] = {}
        self._by_cls: dict[type, Registration] = {}

    def register(
        self, tag: str, cls: type, fields: tuple[str, ...] | list[str] | None = None
    ) -> Registration:
        """Register *cls* under *tag*.

        Args:
            tag: Unique name used to refer to the type.
            cls: Constructor called with the field values positionally.
            fields: Parameter order. Defaults to the dataclass fields of *cls*.

        Returns:
            The stored Registration.
        """
        if tag in self._by_tag:
            raise CodecError(f"Type tag {tag!r} is already registered")
        if fields is None:
            if not dataclasses.is_dataclass(cls):
                raise CodecError(
                    f"{cls.__name__} is not a dataclass; pass fields explicitly"
                )
            fields = [f.name for f in dataclasses.fields(cls) if f.init]
        registration = Registration(tag=tag, cls=cls, fields=tuple(fields))
        self._by_tag[tag] = registration
        self._by_cls.setdefault(cls, registration)
        logger.debug("Registered %s as %r with fields %s", cls.__name__, tag, fields)
        return registration

    def resolve(self, target: str | type) -> Registration:
        """Look up a registration by tag or by registered class."""
        if isinstance(target, str):
            registration = self._by_tag.get(target)
        elif isinstance(target, type):
            registration = self._by_cls.get(target)
        else:
            registration = None
        if registration is None:
            raise UnknownTypeError(target)
        return registration

    def tags(self) -> list[str]:
        return list(self._by_tag)

    def __contains__(self, target: object) -> bool:
        return target in self._by_tag or target in self._by_cls

    def __len__(self) -> int:
        return len(self._by_tag)


def default_registry() -> TypeRegistry:
    """Create a TypeRegistry with the built-in model types registered."""
    from objkit.model.rectangle import Rectangle

    registry = TypeRegistry()
    registry.register("rectangle", Rectangle)
    return registry
