"""Shared logging configuration for the package entry points.

Usage::

    from sample_stats.common.logging_config import configure_logging
    configure_logging()
"""
from __future__ import annotations

import logging
import sys


def configure_logging(
    level: int = logging.WARNING,
    fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    datefmt: str = "%Y-%m-%dT%H:%M:%S%z",
) -> None:
    """Set up root logging on stderr with a consistent format.

    Call once at the CLI entry point. A root logger that already has handlers
    is left untouched. Records go to stderr so they never mix with reports.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    root.setLevel(level)
    root.addHandler(handler)
