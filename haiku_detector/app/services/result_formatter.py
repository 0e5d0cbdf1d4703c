"""Markdown rendering for haiku analysis results."""

from __future__ import annotations

from typing import Dict, List

from haiku_detector.core import (
    FAILURE_EXHAUSTED,
    FAILURE_LINE_MISMATCH,
    FAILURE_OVERSHOOT,
    FAILURE_TOO_FEW_WORDS,
    HAIKU_TARGETS,
    STRICT_MODE,
    HaikuAnalysis,
)


_FAILURE_DESCRIPTIONS: Dict[str, str] = {
    FAILURE_LINE_MISMATCH: "The three lines do not count out to 5-7-5.",
    FAILURE_TOO_FEW_WORDS: "A haiku needs at least three words.",
    FAILURE_OVERSHOOT: "A word ran past the syllable budget of its line.",
    FAILURE_EXHAUSTED: "The message ended before all three lines were filled.",
}


def _format_sums(sums) -> str:
    return "-".join(str(value) for value in sums)


class HaikuResultFormatter:
    """Render :class:`HaikuAnalysis` objects for display."""

    def format_analysis(self, message: str, analysis: HaikuAnalysis) -> str:
        if not (message or "").strip():
            return "✍️ Enter a message to check it for haiku structure."

        mode_label = "three written lines" if analysis.mode == STRICT_MODE else "one word stream"
        target = _format_sums(HAIKU_TARGETS)

        if analysis.matched:
            return "\n".join(
                [
                    "### 🌸 Haiku detected",
                    "",
                    f"Read as {mode_label}: **{_format_sums(analysis.segment_syllables)}** syllables.",
                ]
            )

        output: List[str] = ["### No haiku this time", ""]
        description = _FAILURE_DESCRIPTIONS.get(analysis.failure_reason or "")
        if description:
            output.append(description)
        output.append(f"- Read as {mode_label}")
        if analysis.segment_syllables:
            output.append(
                f"- Syllables counted: `{_format_sums(analysis.segment_syllables)}` (target `{target}`)"
            )
        output.append(f"- Words read: {analysis.words_consumed}")
        return "\n".join(output)


__all__ = ["HaikuResultFormatter"]
