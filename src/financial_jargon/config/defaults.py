from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Defaults:
    logs_root: str
    locale: str | None  # None -> fixed English month names


DEFAULTS = Defaults(
    logs_root="jargon-logs",
    locale=None,
)
