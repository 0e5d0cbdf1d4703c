"""Haiku structure detection for chat messages."""

from .core import HAIKU_TARGETS, HaikuAnalysis, analyze_haiku, is_haiku
from .utils.syllables import estimate_syllable_count

__all__ = [
    "HAIKU_TARGETS",
    "HaikuAnalysis",
    "analyze_haiku",
    "is_haiku",
    "estimate_syllable_count",
]
