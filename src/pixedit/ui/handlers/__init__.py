"""UI event handlers organized by feature area.

- upload: Image selection and ingestion
- editing: Edit submission and Generate button state
"""

from .editing import (
    handle_submit,
    start_edit,
    update_generate_button,
)
from .upload import (
    handle_image_select,
)

__all__ = [
    # Upload handlers
    "handle_image_select",
    # Editing handlers
    "handle_submit",
    "start_edit",
    "update_generate_button",
]
