"""State management utilities for Pixedit UI.

This module handles lazy initialization of the per-session editor and the
state transitions shared by the UI handlers.
"""

import logging

from pixedit.core.config import PixeditConfig, config
from pixedit.core.edit_adapters import adapter_registry
from pixedit.core.editor import ImageEditor
from pixedit.core.ingestion import UploadedFile

from .models import EditorState

logger = logging.getLogger(__name__)


def initialize_ui_state(
    state: EditorState | None = None, app_config: PixeditConfig | None = None
) -> EditorState:
    """Initialize or ensure UI state is ready.

    Creates the session's ImageEditor on first use, wired to the adapter
    named by ``default_adapter`` in the configuration.

    Args:
        state: Existing EditorState or None
        app_config: Configuration to build the adapter from (default: global config)

    Returns:
        Initialized EditorState instance

    Raises:
        KeyError: If the configured adapter is not registered
    """
    if state is None:
        logger.info("Creating new EditorState")
        state = EditorState()

    if state.editor is not None:
        logger.debug("EditorState already initialized")
        return state

    app_config = app_config or config

    try:
        logger.info(f"Initializing edit adapter: {app_config.default_adapter}")
        adapter = adapter_registry.instantiate(app_config.default_adapter, app_config)
        state.editor = ImageEditor(adapter)
        logger.info(f"EditorState initialization complete: {state}")
        return state

    except Exception as e:
        logger.error(f"Error initializing EditorState: {e}", exc_info=True)
        raise


def select_image(state: EditorState, uploaded: UploadedFile) -> EditorState:
    """Replace the current image and clear any previous result or error."""
    state.original = uploaded
    state.edited = None
    state.error = None
    return state


def begin_edit(state: EditorState) -> EditorState:
    """Enter the loading state, discarding the previous result."""
    state.is_loading = True
    state.edited = None
    state.error = None
    return state


def finish_edit(state: EditorState, image: str | None, error: str | None) -> EditorState:
    """Leave the loading state with either a result or an error."""
    state.is_loading = False
    state.edited = image
    state.error = error
    return state
