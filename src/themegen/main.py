"""Command line entry point.

Loads configuration, initializes logging, and writes (or checks) the
generated theme stylesheet.
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from themegen.core.config import ConfigManager
from themegen.core.logging_setup import setup_logging
from themegen.gui import build_theme

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="themegen",
        description="Generate the light/dark/black/auto theme stylesheet.",
    )
    ap.add_argument("--config", default=None, help="path to themegen.ini")
    ap.add_argument("--out", default=None, help="output path (overrides output_path)")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    ap.add_argument(
        "--check",
        action="store_true",
        help="do not write; exit 1 if the output file is missing or stale",
    )
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Generate the stylesheet. Returns the process exit status.

    A failed write is logged and re-raised so the process exits non-zero.
    """
    args = parse_args(argv)
    config_manager = ConfigManager(args.config)
    setup_logging(config_manager, args.log_level)

    output = args.out or config_manager.get("output_path", fallback=str(build_theme.OUTPUT))

    if args.check:
        return 0 if build_theme.check(output) else 1

    try:
        build_theme.build(output)
    except OSError:
        logger.exception("Failed to write theme file: %s", output)
        raise

    print(build_theme.CONFIRMATION)
    return 0
