"""Image ingestion: turn a selected file into an in-memory data URL.

The resulting `UploadedFile` holds the file's bytes as a data URL
(``data:<media type>;base64,<payload>``) that can be displayed directly and
that the edit adapter unpacks before sending the payload to the remote
service.

Ingestion performs no content validation. Whatever bytes the file holds are
encoded; restricting the picker to image types is the caller's job.
"""

import base64
import binascii
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

import anyio.to_thread

from .errors import IngestionError

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = "application/octet-stream"
DOWNLOAD_PREFIX = "edited-"

_DATA_URL_SCHEME = "data:"
_BASE64_MARKER = ";base64"


def to_data_url(content: bytes, media_type: str) -> str:
    """Encode raw bytes as a base64 data URL tagged with ``media_type``."""
    payload = base64.b64encode(content).decode("ascii")
    return f"{_DATA_URL_SCHEME}{media_type}{_BASE64_MARKER},{payload}"


def split_data_url(data_url: str) -> tuple[str, str]:
    """Split a base64 data URL into its media type and base64 payload.

    Args:
        data_url: String of the form ``data:<media type>;base64,<payload>``

    Returns:
        Tuple of (media_type, base64_payload)

    Raises:
        ValueError: If the string is not a base64 data URL
    """
    header, sep, payload = data_url.partition(",")
    if not sep or not header.startswith(_DATA_URL_SCHEME) or not header.endswith(_BASE64_MARKER):
        raise ValueError("Not a base64 data URL")

    media_type = header[len(_DATA_URL_SCHEME) : -len(_BASE64_MARKER)]
    return media_type, payload


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """Decode a base64 data URL back into its media type and raw bytes.

    Raises:
        ValueError: If the string is not a base64 data URL or the payload is
            not valid base64
    """
    media_type, payload = split_data_url(data_url)
    try:
        content = base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
    return media_type, content


@dataclass(frozen=True)
class UploadedFile:
    """A user-selected image held in memory.

    Created once per file selection and replaced wholesale on the next one.

    Attributes
    ----------
    data : str
        Data URL whose media-type prefix matches ``media_type``
    media_type : str
        Declared MIME type of the original file
    name : str
        Original file name, used to label the download
    """

    data: str
    media_type: str
    name: str

    @property
    def raw_payload(self) -> str:
        """Base64 payload with the data URL prefix stripped."""
        return split_data_url(self.data)[1]

    @property
    def download_name(self) -> str:
        """File name offered when downloading the edited result."""
        return f"{DOWNLOAD_PREFIX}{self.name}"


def guess_media_type(name: str) -> str:
    """Guess a MIME type from a file name, falling back to octet-stream."""
    media_type, _ = mimetypes.guess_type(name)
    return media_type or DEFAULT_MEDIA_TYPE


def uploaded_file_from_bytes(content: bytes, media_type: str, name: str) -> UploadedFile:
    """Build an `UploadedFile` from bytes already in memory."""
    return UploadedFile(data=to_data_url(content, media_type), media_type=media_type, name=name)


async def read_uploaded_file(
    path: str | Path,
    media_type: str | None = None,
    name: str | None = None,
) -> UploadedFile:
    """Read a file from disk into an `UploadedFile`.

    The read runs in a worker thread so the event loop stays responsive. The
    caller only sees the finished value or the failure.

    Args:
        path: Path of the selected file
        media_type: Declared MIME type (guessed from the name if omitted)
        name: Original file name (defaults to the path's base name)

    Returns:
        The populated UploadedFile

    Raises:
        IngestionError: If the file cannot be read for any reason
    """
    path = Path(path)
    name = name or path.name
    media_type = media_type or guess_media_type(name)

    try:
        content = await anyio.to_thread.run_sync(path.read_bytes)
    except OSError as e:
        logger.error(f"Failed to read uploaded file {path}: {e}", exc_info=True)
        raise IngestionError() from e

    logger.info(f"Ingested {name} ({media_type}, {len(content)} bytes)")
    return uploaded_file_from_bytes(content, media_type, name)
