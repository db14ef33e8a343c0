"""Pytest configuration.

Ensures src is on sys.path so tests can import `themegen.*` without an
install, and keeps each test isolated from the caller's environment and
from handlers and levels that setup_logging leaves on the root logger.
"""

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from themegen.core.config import DEFAULTS  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in DEFAULTS:
        monkeypatch.delenv(f"TG_{key.upper()}", raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers and type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
