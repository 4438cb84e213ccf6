"""Edit submission handlers.

Submitting runs in two steps wired with ``.click(...).then(...)``:
`start_edit` flips the UI into its loading state right away, then
`handle_submit` awaits the editor and shows the image or the error.
The "Change Image" picker stays locked in between.
"""

import logging

import gradio as gr

from pixedit.core.errors import UNKNOWN_REMOTE_ERROR

from ..adapters import data_url_to_image, write_download_file
from ..models import GENERATE_LABEL, GENERATING_LABEL, EditorState
from ..state import begin_edit, finish_edit, initialize_ui_state
from .common import error_update

logger = logging.getLogger(__name__)


def update_generate_button(instruction: str, state: EditorState) -> dict:
    """Enable Generate only when there is an instruction and nothing is running."""
    return gr.update(interactive=state.can_submit(instruction))


def start_edit(state: EditorState) -> tuple:
    """Enter the loading state before the request is sent.

    Returns:
        Tuple of (generate_button, instruction_box, change_image_picker,
        edited_preview, download_button, error_box, updated_state)
    """
    state = begin_edit(state)
    return (
        gr.update(interactive=False, value=GENERATING_LABEL),
        gr.update(interactive=False),
        gr.update(interactive=False),
        gr.update(value=None),
        gr.update(value=None, visible=False),
        error_update(None),
        state,
    )


async def handle_submit(instruction: str, state: EditorState) -> tuple:
    """Run one edit request and show its outcome.

    The download is named after the image that was submitted, even if the
    selection changed while the request was outstanding.

    Args:
        instruction: Editing instruction text
        state: UI state

    Returns:
        Tuple of (edited_preview, download_button, error_box, generate_button,
        instruction_box, change_image_picker, updated_state)
    """
    image = None
    error = None
    submitted = state.original

    try:
        state = initialize_ui_state(state)
        result = await state.editor.submit(submitted, instruction)
        image, error = result.image, result.error
    except Exception as e:
        # Unexpected error (e.g., editor could not be created)
        logger.error(f"Error handling edit submission: {e}", exc_info=True)
        error = UNKNOWN_REMOTE_ERROR

    download = gr.update(value=None, visible=False)
    if image is not None:
        try:
            path = write_download_file(image, submitted.download_name)
            download = gr.update(value=str(path), visible=True)
        except (ValueError, OSError) as e:
            logger.error(f"Could not prepare download: {e}", exc_info=True)

    state = finish_edit(state, image, error)

    return (
        gr.update(value=data_url_to_image(image)),
        download,
        error_update(error),
        gr.update(interactive=state.can_submit(instruction), value=GENERATE_LABEL),
        gr.update(interactive=True),
        gr.update(interactive=True),
        state,
    )
