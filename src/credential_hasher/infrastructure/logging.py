"""Logging setup for command-line processes that print results on stdout."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value, defaulting to INFO."""

    normalized = level.strip().upper()
    resolved = logging.getLevelName(normalized) if normalized else logging.INFO
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str, stream: TextIO | None = None) -> int:
    """Send log records to stderr (or stream) so stdout stays reserved for output."""

    resolved_level = resolve_log_level(level)
    logging.basicConfig(
        level=resolved_level,
        format=_LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
        force=True,
    )
    return resolved_level
