"""Chat reply orchestration around the haiku detector."""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

from haiku_detector.core import HaikuAnalysis, analyze_haiku
from haiku_detector.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)


HAIKU_ANNOTATION = "Beautiful haiku detected, perfectly structured in the 5-7-5 form."

_CHECKS_COUNTER = create_counter(
    "haiku_detector_checks_total",
    "Number of chat messages checked for haiku structure",
    ("mode", "result"),
)
_CHECK_LATENCY = create_histogram(
    "haiku_detector_check_seconds",
    "Time spent checking a chat message for haiku structure",
)


def extract_reply_content(raw: str, content_type: str = "") -> str:
    """Return the assistant text carried by an LLM response body.

    JSON bodies may be a bare string or an object exposing ``answer`` or
    ``response``; any other JSON payload is re-serialised. Bodies that are not
    JSON, or fail to decode, are returned untouched.
    """

    text = raw or ""
    if "application/json" not in (content_type or "").lower():
        return text

    try:
        data: Any = json.loads(text)
    except ValueError:
        return text

    if isinstance(data, str):
        return data
    if isinstance(data, dict):
        for key in ("answer", "response"):
            value = data.get(key)
            if value:
                return str(value)
    return json.dumps(data)


class HaikuReplyService:
    """Append the haiku annotation to assistant replies when it applies."""

    def __init__(
        self,
        *,
        annotation: Optional[str] = None,
        analyzer: Optional[Callable[[str], HaikuAnalysis]] = None,
    ) -> None:
        self.annotation = annotation or HAIKU_ANNOTATION
        self._analyzer = analyzer or analyze_haiku
        self._logger = get_logger(__name__).bind(component="reply_service")

    def analyze(self, message: str) -> HaikuAnalysis:
        """Check ``message`` while recording metrics and a tracing span."""

        text = (message or "").strip()
        with start_span("haiku.analyze", {"message.length": len(text)}) as span:
            with _CHECK_LATENCY.time():
                analysis = self._analyzer(text)
            add_span_attributes(
                span,
                {
                    "haiku.mode": analysis.mode,
                    "haiku.matched": analysis.matched,
                    "haiku.words_consumed": analysis.words_consumed,
                },
            )

        result = "matched" if analysis.matched else "rejected"
        _CHECKS_COUNTER.labels(mode=analysis.mode, result=result).inc()
        self._logger.debug(
            "Haiku check finished",
            context={
                "mode": analysis.mode,
                "matched": analysis.matched,
                "segments": list(analysis.segment_syllables),
                "failure_reason": analysis.failure_reason,
            },
        )
        return analysis

    def annotate_reply(self, message: str, reply: str) -> str:
        """Return ``reply`` with the annotation appended if ``message`` is a haiku."""

        with start_span("haiku.annotate_reply") as span:
            text = (message or "").strip()
            if not text:
                error = ValueError("message is required")
                record_exception(span, error)
                self._logger.warning(
                    "Rejected reply annotation for blank message",
                    context={"reply_length": len(reply or "")},
                )
                raise error

            return self.apply_annotation(reply, self.analyze(text))

    def apply_annotation(self, reply: str, analysis: HaikuAnalysis) -> str:
        """Append the annotation to ``reply`` when ``analysis`` matched."""

        if not analysis.matched:
            return reply

        self._logger.info(
            "Haiku detected in chat message",
            context={"mode": analysis.mode, "segments": list(analysis.segment_syllables)},
        )
        return f"{reply}\n\n{self.annotation}"

    def compose_reply(self, message: str, raw: str, content_type: str = "") -> str:
        """Extract the assistant text from ``raw`` and annotate it for ``message``."""

        return self.annotate_reply(message, extract_reply_content(raw, content_type))


__all__ = ["HAIKU_ANNOTATION", "HaikuReplyService", "extract_reply_content"]
