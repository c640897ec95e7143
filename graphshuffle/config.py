"""Настройки по умолчанию.

Без pydantic и env-магии: дефолты правятся здесь, а переопределения
можно подложить YAML-файлом (см. config_loader.load_settings).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Default parameters for shuffling and logging."""

    # Shuffle
    DEFAULT_SHUFFLES_PER_EDGE: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    LOG_NAMESPACE: str = "graphshuffle"


settings = Settings()
