"""Utility helpers shared across the :mod:`haiku_detector` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .syllables import count_line_syllables, estimate_syllable_count
from .observability import (
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

__all__ = [
    "configure_logging",
    "count_line_syllables",
    "estimate_syllable_count",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "record_exception",
    "start_span",
]
