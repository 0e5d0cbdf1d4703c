"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_LEVEL_ENV_VAR = "HAIKU_LOG_LEVEL"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        resolved = getattr(logging, normalized, logging.INFO)
        return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> None:
    """Initialise root logging handlers for the detector.

    The level comes from ``level`` when given, otherwise from the
    ``HAIKU_LOG_LEVEL`` environment variable, and falls back to ``INFO``.
    Repeated calls are ignored unless ``force`` is set.
    """

    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    env_level = os.environ.get(_LEVEL_ENV_VAR)
    resolved_level = _resolve_level(level if level is not None else env_level)

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT, force=force)
    logging.getLogger("haiku_detector").setLevel(resolved_level)
    _CONFIGURED = True


__all__ = ["configure_logging"]
