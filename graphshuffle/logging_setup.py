"""Logging configuration for scripts that use graphshuffle.

The library itself only creates named loggers; call setup_logging() from
an entry point to actually see the records.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import Settings, settings


def setup_logging(
    level: str | int | None = None,
    log_dir: str | Path | None = None,
    cfg: Settings = settings,
) -> logging.Logger:
    """Configure the console handler and, optionally, a UTF-8 file log."""
    lvl = level if level is not None else cfg.LOG_LEVEL
    if isinstance(lvl, str):
        lvl = logging.getLevelName(lvl.upper())
    logging.basicConfig(level=lvl, format=cfg.LOG_FORMAT)

    logger = logging.getLogger(cfg.LOG_NAMESPACE)
    logger.setLevel(lvl)

    if log_dir is not None:
        logdir = Path(log_dir)
        logdir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(logdir / f"{cfg.LOG_NAMESPACE}.log", encoding="utf-8")
        fh.setFormatter(logging.Formatter(cfg.LOG_FORMAT))
        logger.addHandler(fh)
    return logger
