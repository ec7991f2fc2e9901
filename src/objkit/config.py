from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjkitConfig:
    json_separators: tuple[str, str] = (",", ":")  # compact, no spaces
    ensure_ascii: bool = False
    verbose_log_level: str = "DEBUG"
