"""Editor boundary: validation, single-flight guard, and error conversion.

`ImageEditor` is what the UI calls. It validates the request before any
network call, allows at most one outstanding edit at a time, and turns every
failure into a plain message in an `EditResult`. Nothing typed escapes past
this point.

Concurrency
-----------
A second ``submit()`` while one is outstanding is rejected immediately with
the in-progress message rather than queued. The check and the acquisition
happen without an intervening await, so on a single event loop two submits
can never both pass it.
"""

import asyncio
import logging
from dataclasses import dataclass

from .edit_adapters import EditAdapterBase
from .errors import UNKNOWN_REMOTE_ERROR, EditInProgressError, PixeditError, ValidationError
from .ingestion import UploadedFile
from .validation import validate_edit_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditResult:
    """Outcome of one edit: either an image data URL or an error message."""

    image: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.image is None) == (self.error is None):
            raise ValueError("EditResult needs exactly one of image or error")

    @property
    def ok(self) -> bool:
        return self.image is not None

    @classmethod
    def success(cls, image: str) -> "EditResult":
        return cls(image=image)

    @classmethod
    def failure(cls, error: str) -> "EditResult":
        return cls(error=error)


class ImageEditor:
    """Runs edit requests through an adapter, one at a time.

    Args:
        adapter: The edit adapter that talks to the remote service
    """

    def __init__(self, adapter: EditAdapterBase) -> None:
        self.adapter = adapter
        self._lock = asyncio.Lock()

    @property
    def in_flight(self) -> bool:
        """True while an edit is outstanding."""
        return self._lock.locked()

    def validate(self, image: UploadedFile | None, instruction: str | None) -> None:
        """Validate a request without touching the network.

        Raises:
            ValidationError: If the image or instruction is missing or invalid
        """
        validate_edit_request(image, instruction)

    async def edit(self, image: UploadedFile | None, instruction: str | None) -> str:
        """Validate and run one edit, raising taxonomy errors on failure.

        Raises:
            ValidationError: If the request is incomplete
            EditInProgressError: If another edit is outstanding
            RemoteCallError: If the remote call fails
            NoImageProducedError: If the response has no image
        """
        self.validate(image, instruction)

        if self._lock.locked():
            raise EditInProgressError()

        async with self._lock:
            return await self.adapter.edit(image, instruction)

    async def submit(self, image: UploadedFile | None, instruction: str | None) -> EditResult:
        """Run one edit and convert the outcome to an `EditResult`.

        Never raises for request failures; the message in ``EditResult.error``
        is ready to display.
        """
        try:
            data_url = await self.edit(image, instruction)
        except ValidationError as e:
            logger.warning(f"Validation error: {e}")
            return EditResult.failure(str(e))
        except EditInProgressError as e:
            logger.warning(f"Rejected concurrent edit: {e}")
            return EditResult.failure(str(e))
        except PixeditError as e:
            logger.error(f"Edit failed: {e}")
            return EditResult.failure(str(e))
        except Exception as e:
            logger.error(f"Unexpected error during edit: {e}", exc_info=True)
            return EditResult.failure(UNKNOWN_REMOTE_ERROR)

        logger.info("Edit completed successfully")
        return EditResult.success(data_url)
