"""Shared update helpers for UI handlers."""

import gradio as gr


def error_update(message: str | None) -> dict:
    """Show ``message`` in the error banner, or hide the banner for None."""
    if not message:
        return gr.update(value="", visible=False)
    return gr.update(value=f"❌ {message}", visible=True)
