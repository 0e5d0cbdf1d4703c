"""Utilities for shared syllable estimation logic."""

from __future__ import annotations

import re


__all__ = ["estimate_syllable_count", "count_line_syllables"]


_NON_LETTER_PATTERN = re.compile(r"[^a-z]")
_VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")


def estimate_syllable_count(word: str) -> int:
    """Estimate the number of syllables in ``word`` by counting vowel groups.

    The word is lower-cased and stripped of everything outside ``a``-``z``
    before counting, so ``"queue"`` yields a single group and ``"banana"``
    three. Words without any vowel group still count as one syllable.
    """

    normalized = _NON_LETTER_PATTERN.sub("", (word or "").lower())
    syllable_count = len(_VOWEL_GROUP_PATTERN.findall(normalized))
    return max(1, syllable_count)


def count_line_syllables(line: str) -> int:
    """Sum the per-word estimates for the whitespace separated words of ``line``."""

    return sum(estimate_syllable_count(word) for word in (line or "").split())
