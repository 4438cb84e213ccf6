"""Data models for Pixedit UI state."""

import logging
from dataclasses import dataclass
from typing import Any

from pixedit.core.ingestion import UploadedFile

logger = logging.getLogger(__name__)


@dataclass
class EditorState:
    """Session state for the Gradio UI.

    Each browser session gets its own EditorState, so the single-flight guard
    inside the editor applies per session.

    Attributes
    ----------
    editor : Any | None
        ImageEditor instance (created lazily on first submit)
    original : UploadedFile | None
        Currently selected image, replaced wholesale on each new selection
    edited : str | None
        Data URL of the latest edited image
    error : str | None
        Message from the latest failed action
    is_loading : bool
        True while an edit request is outstanding
    """

    editor: Any | None = None  # ImageEditor instance
    original: UploadedFile | None = None
    edited: str | None = None
    error: str | None = None
    is_loading: bool = False

    @property
    def has_image(self) -> bool:
        return self.original is not None

    def can_submit(self, instruction: str | None) -> bool:
        """Whether the Generate button should be enabled."""
        return bool(instruction and instruction.strip()) and not self.is_loading

    def __repr__(self) -> str:
        """String representation for debugging."""
        name = self.original.name if self.original else None
        return (
            f"EditorState(image={name}, edited={self.edited is not None}, "
            f"error={self.error is not None}, loading={self.is_loading})"
        )


# UI Constants
INSTRUCTION_PLACEHOLDER = (
    'e.g., "make the shirt red", "add a retro filter", "change background to a beach"'
)
GENERATE_LABEL = "Generate"
GENERATING_LABEL = "Generating..."
