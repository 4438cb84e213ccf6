"""Adapter functions for converting between UI values and business objects."""

import io
import logging
import tempfile
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from pixedit.core.ingestion import decode_data_url
from pixedit.core.validation import sanitize_filename_input

logger = logging.getLogger(__name__)


def data_url_to_image(data_url: str | None) -> Image.Image | None:
    """Decode a data URL into a PIL Image for display.

    Ingestion does not validate content, so undecodable bytes yield None
    instead of an error; the preview simply stays empty.

    Args:
        data_url: Image data URL, or None

    Returns:
        Loaded PIL Image, or None if there is nothing displayable
    """
    if not data_url:
        return None

    try:
        _, content = decode_data_url(data_url)
        image = Image.open(io.BytesIO(content))
        image.load()
        return image
    except (ValueError, UnidentifiedImageError, OSError) as e:
        logger.warning(f"Could not decode image for preview: {e}")
        return None


def write_download_file(data_url: str, download_name: str, directory: Path | None = None) -> Path:
    """Write an edited image to disk under its download name.

    Each call gets a fresh temporary directory unless one is given, so the
    served file keeps the exact ``edited-<original name>`` name.

    Args:
        data_url: Edited image data URL
        download_name: File name to offer for download
        directory: Target directory (a new temporary directory if omitted)

    Returns:
        Path of the written file

    Raises:
        ValueError: If data_url is not a base64 data URL
    """
    _, content = decode_data_url(data_url)
    directory = directory or Path(tempfile.mkdtemp(prefix="pixedit-"))
    path = directory / sanitize_filename_input(download_name)
    path.write_bytes(content)
    logger.info(f"Prepared download: {path}")
    return path
