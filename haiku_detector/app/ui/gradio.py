"""User interface assembly for the Gradio demo."""

from __future__ import annotations

from typing import Tuple

import gradio as gr

from haiku_detector.core import analyze_haiku

from ..services.reply_service import HaikuReplyService
from ..services.result_formatter import HaikuResultFormatter


_EXAMPLES = [
    ["the cat sat on mats\na dog ran to the red barn\nthen the sun went down", "Nice lines."],
    ["the cat sat on mats a dog ran to the red barn then the sun went down", "Noted."],
    ["old pond\nfrog leaps in\nwater's sound", "A classic."],
]


def create_interface(
    reply_service: HaikuReplyService,
    formatter: HaikuResultFormatter,
) -> gr.Blocks:
    """Construct the Gradio Blocks page for trying the detector."""

    def check_interface(message: str, reply: str) -> Tuple[str, str]:
        text = (message or "").strip()
        if not text:
            return formatter.format_analysis(text, analyze_haiku(text)), reply or ""
        analysis = reply_service.analyze(text)
        return (
            formatter.format_analysis(text, analysis),
            reply_service.apply_annotation(reply or "", analysis),
        )

    with gr.Blocks(title="Haiku Detector") as demo:
        gr.Markdown("## Haiku Detector\nPaste a chat message to see whether it scans as 5-7-5.")
        with gr.Row():
            with gr.Column():
                message_box = gr.Textbox(label="User message", lines=4)
                reply_box = gr.Textbox(label="Assistant reply", lines=3)
                check_button = gr.Button("Check", variant="primary")
            with gr.Column():
                analysis_output = gr.Markdown()
                reply_output = gr.Textbox(label="Reply sent to the user", lines=5)

        check_button.click(
            check_interface,
            inputs=[message_box, reply_box],
            outputs=[analysis_output, reply_output],
        )
        gr.Examples(examples=_EXAMPLES, inputs=[message_box, reply_box])

    return demo


__all__ = ["create_interface"]
