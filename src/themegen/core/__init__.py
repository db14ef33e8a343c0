"""Core subpackage.

- config: INI-backed settings with environment overrides
- logging_setup: root logger configuration for a generator run
"""
from .config import ConfigManager
from .logging_setup import setup_logging

__all__ = [
    "ConfigManager",
    "setup_logging",
]
