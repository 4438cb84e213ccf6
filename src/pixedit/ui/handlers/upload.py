"""Image selection handlers."""

import logging

import gradio as gr

from pixedit.core.errors import IngestionError
from pixedit.core.ingestion import read_uploaded_file

from ..adapters import data_url_to_image
from ..models import EditorState
from ..state import select_image
from .common import error_update

logger = logging.getLogger(__name__)


async def handle_image_select(
    file_path: str | None, instruction: str, state: EditorState
) -> tuple:
    """Ingest a newly selected file and switch the UI to the editor view.

    Args:
        file_path: Path of the uploaded file (None when the picker is cleared)
        instruction: Current instruction text (decides the Generate button state)
        state: UI state

    Returns:
        Tuple of (upload_group, editor_group, original_preview, edited_preview,
        download_button, error_box, generate_button, updated_state)
    """
    if not file_path:
        # Picker cleared; keep whatever is currently shown
        return (gr.update(),) * 7 + (state,)

    if state.is_loading:
        # The picker is locked during an edit; ignore a late selection
        logger.warning("Ignoring image selection while an edit is in progress")
        return (gr.update(),) * 7 + (state,)

    try:
        uploaded = await read_uploaded_file(file_path)
    except IngestionError as e:
        logger.error(f"Image selection failed: {e}")
        state.error = str(e)
        return (
            gr.update(),
            gr.update(),
            gr.update(),
            gr.update(),
            gr.update(),
            error_update(state.error),
            gr.update(),
            state,
        )

    state = select_image(state, uploaded)
    logger.info(f"Selected image: {uploaded.name}")

    return (
        gr.update(visible=False),
        gr.update(visible=True),
        gr.update(value=data_url_to_image(uploaded.data)),
        gr.update(value=None),
        gr.update(value=None, visible=False),
        error_update(None),
        gr.update(interactive=state.can_submit(instruction)),
        state,
    )
