"""Загрузка переопределений настроек из YAML.

Файл — плоский словарь с ключами из Settings, например::

    DEFAULT_SHUFFLES_PER_EDGE: 25
    LOG_LEVEL: DEBUG
"""

from __future__ import annotations

from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict

import yaml

from .config import Settings, settings


def read_overrides(path: str | Path) -> Dict[str, Any]:
    """Read the raw mapping from a YAML file; a missing file gives {}."""
    path = Path(path)
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return dict(data)


def load_settings(path: str | Path | None = None, base: Settings = settings) -> Settings:
    """Overlay the keys of ``path`` onto ``base``.

    Unknown keys raise ValueError so typos don't silently fall back to defaults.
    """
    if path is None:
        return base
    overrides = read_overrides(path)
    known = {f.name: f for f in fields(Settings)}
    unknown = sorted(k for k in overrides if k not in known)
    if unknown:
        raise ValueError(f"unknown settings keys: {unknown}")

    coerced: Dict[str, Any] = {}
    for key, value in overrides.items():
        default = getattr(base, key)
        # приводим к типу дефолта: yaml может прочитать "0.5" как строку
        coerced[key] = type(default)(value)
    return replace(base, **coerced)
