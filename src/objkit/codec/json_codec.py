"""JSON text encoding and registry-driven decoding."""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from typing import Any

from objkit.codec.registry import TypeRegistry, default_registry
from objkit.config import ObjkitConfig

__all__ = ["to_json_text", "from_json_text"]

logger = logging.getLogger(__name__)


def _finite(value: Any) -> Any:
    """Replace NaN and infinite floats with None, as JSON has no token for them."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _encode_default(obj: Any) -> Any:
    """Encode dataclass instances as objects of their fields, in order."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _finite({f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)})
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json_text(value: Any, *, config: ObjkitConfig | None = None) -> str:
    """Return compact JSON text for *value*; key order follows insertion order.

    NaN and infinite floats are written as null.
    """
    config = config or ObjkitConfig()
    return json.dumps(
        _finite(value),
        separators=config.json_separators,
        ensure_ascii=config.ensure_ascii,
        default=_encode_default,
    )


def from_json_text(
    target: str | type, json_text: str, *, registry: TypeRegistry | None = None
) -> Any:
    """Parse *json_text* and build the type registered for *target*.

    JSON syntax errors propagate as ``json.JSONDecodeError``.
    """
    if registry is None:
        registry = default_registry()
    registration = registry.resolve(target)
    data = json.loads(json_text)
    logger.debug("Decoding %r from %s", registration.tag, type(data).__name__)
    return registration.build(data)
