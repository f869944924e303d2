from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .defaults import DEFAULTS


@dataclass(frozen=True)
class Config:
    logs_root: Path
    locale: str | None


def _req_path(base: dict[str, Any], key: str, default: str) -> Path:
    """Return a required Path, falling back to default if missing/empty."""
    val = base.get(key) or default
    return Path(val)


def _opt_str(base: dict[str, Any], key: str) -> str | None:
    """Return an optional string, or None if missing/empty."""
    val = base.get(key)
    return str(val) if val else None


def _apply_yaml_overrides(base: dict[str, Any], yml: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for k in ("logs_root", "locale"):
        if k in yml:
            out[k] = yml[k]
    return out


def _apply_env_overrides(base: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    if v := os.getenv("JARGON_LOGS_ROOT"):
        out["logs_root"] = v
    if v := os.getenv("JARGON_LOCALE"):
        out["locale"] = v
    return out


def load_config(yaml_path: Path | None = None) -> Config:
    base = {
        "logs_root": DEFAULTS.logs_root,
        "locale": DEFAULTS.locale,
    }

    # ENV overrides (middle precedence)
    base = _apply_env_overrides(base)

    # YAML overrides (highest precedence)
    if yaml_path:
        data = yaml.safe_load(Path(yaml_path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("Config YAML must be a mapping at the top level.")
        base = _apply_yaml_overrides(base, data)

    return Config(
        logs_root=_req_path(base, "logs_root", DEFAULTS.logs_root),
        locale=_opt_str(base, "locale"),
    )
