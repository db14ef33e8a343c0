"""Logging setup utilities for themegen.

Provides a single setup function to configure logging for a generator run:
- Console handler on stderr (stdout is reserved for the confirmation line)
- Optional file handler when ``log_file`` is configured
- Configurable log level via themegen.ini (DEFAULT.log_level) or TG_LOG_LEVEL

Usage:
    from .core.logging_setup import setup_logging
    setup_logging(config_manager)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_from_str(value: Optional[str]) -> int:
    if not value:
        return logging.INFO
    v = str(value).strip().upper()
    mapping = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    return mapping.get(v, logging.INFO)


def setup_logging(config_manager, level: Optional[str | int] = None) -> Optional[Path]:
    """Configure the root logger with a console and optional file handler.

    Returns the log file Path, or None when logging to the console only.

    - Level: from parameter if provided, else DEFAULT.log_level in config, else INFO
    - File: DEFAULT.log_file when set (parent directories are created)
    """
    cfg_get = getattr(config_manager, "get", lambda *_: None)
    if isinstance(level, str):
        lvl = _level_from_str(level)
    elif isinstance(level, int):
        lvl = level
    else:
        lvl = _level_from_str(cfg_get("log_level"))

    logger = logging.getLogger()
    logger.setLevel(lvl)

    # Clear existing handlers to avoid duplicates on re-run
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(lvl)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    file_path: Optional[Path] = None
    log_file = cfg_get("log_file")
    if log_file:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(file_path, encoding="utf-8", delay=True)
        fh.setLevel(lvl)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.debug("Logging initialized: level=%s, file=%s", logging.getLevelName(lvl), file_path)
    return file_path
