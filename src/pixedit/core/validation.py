"""Validation utilities for edit requests."""

import logging
from pathlib import PurePosixPath

from .errors import MISSING_INPUT_ERROR, ValidationError
from .ingestion import UploadedFile

logger = logging.getLogger(__name__)


def validate_edit_request(image: UploadedFile | None, instruction: str | None) -> None:
    """Check that an edit request has both an image and an instruction.

    Runs synchronously, before any network call. A whitespace-only
    instruction counts as empty.

    Args:
        image: The ingested image, or None if nothing was uploaded
        instruction: Editing instruction text

    Raises:
        ValidationError: If the image is missing or the instruction is empty
    """
    if image is None or not instruction or not instruction.strip():
        raise ValidationError(MISSING_INPUT_ERROR)


def sanitize_filename_input(text: str, max_length: int = 255) -> str:
    """Sanitize user input for use in filenames.

    Characters that are invalid in file names (path separators included) are
    replaced. Names longer than ``max_length`` lose characters from the stem;
    the extension is kept.

    Args:
        text: User input text
        max_length: Maximum length of the returned name

    Returns:
        Sanitized text safe for filenames
    """
    # Remove potentially problematic characters
    invalid_chars = '<>:"/\\|?*'
    for char in invalid_chars:
        text = text.replace(char, "_")

    if len(text) <= max_length:
        return text

    suffix = PurePosixPath(text).suffix
    if len(suffix) >= max_length:
        suffix = ""
    return text[: max_length - len(suffix)] + suffix
