"""Gradio user interface for Pixedit."""
