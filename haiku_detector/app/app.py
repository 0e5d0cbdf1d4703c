"""Application wiring for the haiku detector demo."""

from __future__ import annotations

import os
from typing import Optional

from haiku_detector.core import HaikuAnalysis
from haiku_detector.utils.logging_config import configure_logging
from haiku_detector.utils.observability import get_logger

from haiku_detector.app.services.reply_service import HaikuReplyService
from haiku_detector.app.services.result_formatter import HaikuResultFormatter


_DEFAULT_SERVER_PORT = 7860
_TRUTHY = {"1", "true", "yes", "on"}


class HaikuDetectorApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        *,
        reply_service: Optional[HaikuReplyService] = None,
        formatter: Optional[HaikuResultFormatter] = None,
        annotation: Optional[str] = None,
    ) -> None:
        self._logger = get_logger(__name__).bind(component="app_facade")
        self.reply_service = reply_service or HaikuReplyService(annotation=annotation)
        self.formatter = formatter or HaikuResultFormatter()
        self._logger.info(
            "Application dependencies wired",
            context={"annotation": self.reply_service.annotation},
        )

    # Public API ------------------------------------------------------------
    def check_message(self, message: str) -> HaikuAnalysis:
        return self.reply_service.analyze(message)

    def compose_reply(self, message: str, raw: str, content_type: str = "") -> str:
        return self.reply_service.compose_reply(message, raw, content_type)

    def format_analysis(self, message: str) -> str:
        return self.formatter.format_analysis(message, self.check_message(message))

    def create_gradio_interface(self):
        from haiku_detector.app.ui.gradio import create_interface

        return create_interface(self.reply_service, self.formatter)


def _should_share_interface() -> bool:
    """Return whether the Gradio UI should request a public share link."""

    env_value = os.environ.get("HAIKU_SHARE", "")
    return str(env_value).strip().lower() in _TRUTHY


def _server_port() -> int:
    env_value = os.environ.get("HAIKU_SERVER_PORT", "")
    try:
        return int(env_value)
    except (TypeError, ValueError):
        return _DEFAULT_SERVER_PORT


def main() -> None:
    configure_logging()
    app = HaikuDetectorApp()
    interface = app.create_gradio_interface()
    interface.launch(
        server_name="0.0.0.0",
        server_port=_server_port(),
        share=_should_share_interface(),
    )


__all__ = ["HaikuDetectorApp", "main"]
