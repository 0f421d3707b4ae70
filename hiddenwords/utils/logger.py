"""Logging utilities for hidden-words."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure root logging with a compact formatter.

    Log records go to stderr so the report printed on stdout stays plain text.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger."""

    return logging.getLogger(name or "hiddenwords")
