"""Core haiku matching for :mod:`haiku_detector`."""

from .matcher import (
    FAILURE_EXHAUSTED,
    FAILURE_LINE_MISMATCH,
    FAILURE_OVERSHOOT,
    FAILURE_TOO_FEW_WORDS,
    FLEXIBLE_MODE,
    HAIKU_TARGETS,
    STRICT_MODE,
    HaikuAnalysis,
    analyze_haiku,
    is_haiku,
)

__all__ = [
    "HAIKU_TARGETS",
    "STRICT_MODE",
    "FLEXIBLE_MODE",
    "FAILURE_LINE_MISMATCH",
    "FAILURE_TOO_FEW_WORDS",
    "FAILURE_OVERSHOOT",
    "FAILURE_EXHAUSTED",
    "HaikuAnalysis",
    "analyze_haiku",
    "is_haiku",
]
