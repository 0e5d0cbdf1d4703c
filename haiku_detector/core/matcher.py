"""Detect 5-7-5 haiku structure in free-form chat messages.

Two segmentation strategies are available and one is picked per message:

* strict mode applies when the message already spans exactly three
  non-empty lines; each line must hit its syllable target on its own.
* flexible mode ignores line breaks and greedily partitions the word stream,
  closing a segment whenever the running sum hits the current target and
  failing as soon as it overshoots.

Both strategies are pure functions of the message text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from haiku_detector.utils.syllables import count_line_syllables, estimate_syllable_count


HAIKU_TARGETS: Tuple[int, ...] = (5, 7, 5)

STRICT_MODE = "strict"
FLEXIBLE_MODE = "flexible"

FAILURE_LINE_MISMATCH = "line_mismatch"
FAILURE_TOO_FEW_WORDS = "too_few_words"
FAILURE_OVERSHOOT = "overshoot"
FAILURE_EXHAUSTED = "exhausted"

_LINE_BREAK_PATTERN = re.compile(r"\n+")


@dataclass(frozen=True)
class HaikuAnalysis:
    """Outcome of checking one message against the 5-7-5 form."""

    mode: str
    matched: bool
    segment_syllables: Tuple[int, ...] = ()
    words_consumed: int = 0
    failure_reason: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "mode": self.mode,
            "matched": self.matched,
            "segment_syllables": list(self.segment_syllables),
            "words_consumed": self.words_consumed,
            "failure_reason": self.failure_reason,
        }


def _split_manual_lines(message: str) -> List[str]:
    return _LINE_BREAK_PATTERN.split(message.strip())


def _is_manual_layout(lines: Sequence[str]) -> bool:
    return len(lines) == len(HAIKU_TARGETS) and all(line.strip() for line in lines)


def _match_lines(lines: Sequence[str]) -> HaikuAnalysis:
    sums = tuple(count_line_syllables(line) for line in lines)
    matched = sums == HAIKU_TARGETS
    return HaikuAnalysis(
        mode=STRICT_MODE,
        matched=matched,
        segment_syllables=sums,
        words_consumed=sum(len(line.split()) for line in lines),
        failure_reason=None if matched else FAILURE_LINE_MISMATCH,
    )


def _match_word_stream(words: Sequence[str]) -> HaikuAnalysis:
    if len(words) < len(HAIKU_TARGETS):
        return HaikuAnalysis(
            mode=FLEXIBLE_MODE,
            matched=False,
            words_consumed=0,
            failure_reason=FAILURE_TOO_FEW_WORDS,
        )

    closed: List[int] = []
    target_index = 0
    running_sum = 0

    for position, word in enumerate(words, start=1):
        running_sum += estimate_syllable_count(word)
        target = HAIKU_TARGETS[target_index]

        if running_sum == target:
            closed.append(running_sum)
            target_index += 1
            running_sum = 0
            if target_index == len(HAIKU_TARGETS):
                return HaikuAnalysis(
                    mode=FLEXIBLE_MODE,
                    matched=True,
                    segment_syllables=tuple(closed),
                    words_consumed=position,
                )
        elif running_sum > target:
            # No backtracking: syllables already placed in earlier segments stay there.
            return HaikuAnalysis(
                mode=FLEXIBLE_MODE,
                matched=False,
                segment_syllables=tuple(closed) + (running_sum,),
                words_consumed=position,
                failure_reason=FAILURE_OVERSHOOT,
            )

    partial = (running_sum,) if running_sum else ()
    return HaikuAnalysis(
        mode=FLEXIBLE_MODE,
        matched=False,
        segment_syllables=tuple(closed) + partial,
        words_consumed=len(words),
        failure_reason=FAILURE_EXHAUSTED,
    )


def analyze_haiku(message: str) -> HaikuAnalysis:
    """Return the full 5-7-5 breakdown for ``message``.

    Never raises; empty and non-alphabetic messages simply fail to match.
    """

    text = message or ""
    lines = _split_manual_lines(text)
    if _is_manual_layout(lines):
        return _match_lines(lines)
    return _match_word_stream(text.split())


def is_haiku(message: str) -> bool:
    """Return ``True`` when ``message`` follows the 5-7-5 syllable form."""

    return analyze_haiku(message).matched


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
