"""Gemini image edit adapter.

This module provides the adapter for Google's Gemini image models, which
perform instruction-based image editing. The adapter sends the source image
and the instruction in a single request and pulls the edited image out of the
multi-part response.

Request Shape
-------------
One user content with two ordered parts:
1. Inline data: the raw image bytes tagged with the upload's media type
2. Text: the editing instruction

The generation config restricts the response modality to IMAGE.

Response Handling
-----------------
Only the first candidate is read. Its parts are scanned in order and the
first part carrying inline image data wins; any text commentary or further
image parts are ignored. The result is re-encoded as a data URL using the
part's own media type, which may differ from the input's (JPEG in, PNG out).

Usage Example
-------------
    >>> from pixedit.core.adapters.gemini_image_edit import GeminiImageEditAdapter
    >>> from pixedit.core.config import PixeditConfig
    >>>
    >>> adapter = GeminiImageEditAdapter(PixeditConfig(api_key="..."))
    >>> data_url = await adapter.edit(uploaded, "make it red")

See Also
--------
- EditAdapterBase: Base class for all edit adapters
- ImageEditor: Boundary that validates and guards concurrent submits
"""

import base64
import logging
from typing import Any

from google import genai
from google.genai import types

from pixedit.core.config import PixeditConfig
from pixedit.core.edit_adapters import EditAdapterBase, adapter_registry
from pixedit.core.errors import (
    UNKNOWN_REMOTE_ERROR,
    NoImageProducedError,
    RemoteCallError,
)
from pixedit.core.ingestion import UploadedFile, to_data_url

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Failed to generate image: "
FALLBACK_RESULT_MEDIA_TYPE = "image/png"


class GeminiImageEditAdapter(EditAdapterBase):
    """Edit adapter backed by the Gemini ``generate_content`` API.

    The client is created on first use from the injected configuration, so
    constructing the adapter never touches the network or the environment.
    Tests can pass a ready-made client instead.

    Attributes
    ----------
    name : str
        Registry name ("Gemini-Image-Edit")
    config : PixeditConfig
        Configuration holding ``api_key`` and ``model_id``
    """

    name = "Gemini-Image-Edit"
    description = "Instruction-based image editing with Google Gemini"
    version = "1.0.0"

    def __init__(self, config: PixeditConfig, client: genai.Client | None = None) -> None:
        super().__init__(config)
        self._client = client

    @property
    def client(self) -> genai.Client:
        """The Gemini client, created lazily from ``config.api_key``."""
        if self._client is None:
            if not self.config.api_key:
                raise ValueError("API key is not configured (set PIXEDIT_API_KEY)")
            self._client = genai.Client(api_key=self.config.api_key)
        return self._client

    def build_contents(self, image: UploadedFile, instruction: str) -> types.Content:
        """Build the two-part request content (image first, then instruction)."""
        raw = base64.b64decode(image.raw_payload)
        return types.Content(
            role="user",
            parts=[
                types.Part(inline_data=types.Blob(data=raw, mime_type=image.media_type)),
                types.Part(text=instruction),
            ],
        )

    async def edit(self, image: UploadedFile, instruction: str) -> str:
        """Send one edit request to Gemini and return the edited image.

        Args:
            image: The ingested source image
            instruction: Free-text editing instruction

        Returns:
            Data URL of the first image part in the response

        Raises:
            NoImageProducedError: If the response holds no image part
            RemoteCallError: For any other failure
        """
        try:
            contents = self.build_contents(image, instruction)
            logger.info(
                f"Requesting edit from {self.config.model_id} "
                f"for {image.name} ({image.media_type})"
            )
            response = await self.client.aio.models.generate_content(
                model=self.config.model_id,
                contents=contents,
                config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
            )
            return extract_image(response)

        except NoImageProducedError as e:
            logger.error(f"Error editing image with Gemini: {e}")
            raise NoImageProducedError(f"{FAILURE_PREFIX}{e}") from e

        except Exception as e:
            logger.error(f"Error editing image with Gemini: {e}", exc_info=True)
            message = str(e)
            if not message:
                raise RemoteCallError(UNKNOWN_REMOTE_ERROR) from e
            raise RemoteCallError(f"{FAILURE_PREFIX}{message}") from e


def _first_candidate_parts(response: Any) -> list[Any]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


def extract_image(response: Any) -> str:
    """Return a data URL built from the first inline image part of a response.

    Inline data normally arrives as raw bytes; a base64 string is passed
    through unchanged. A part without a media type is labelled image/png.

    Raises:
        NoImageProducedError: If the first candidate has no inline data part
    """
    for part in _first_candidate_parts(response):
        inline_data = getattr(part, "inline_data", None)
        if not inline_data or not inline_data.data:
            continue

        media_type = inline_data.mime_type or FALLBACK_RESULT_MEDIA_TYPE
        if isinstance(inline_data.data, str):
            return f"data:{media_type};base64,{inline_data.data}"
        return to_data_url(inline_data.data, media_type)

    raise NoImageProducedError()


adapter_registry.register(GeminiImageEditAdapter)
