"""Services used by the chat workflow and the demo UI."""

from .reply_service import HAIKU_ANNOTATION, HaikuReplyService, extract_reply_content
from .result_formatter import HaikuResultFormatter

__all__ = [
    "HAIKU_ANNOTATION",
    "HaikuReplyService",
    "HaikuResultFormatter",
    "extract_reply_content",
]
