"""Error taxonomy for Pixedit.

Every error raised by the core carries a message that is safe to show to the
user as-is. The editor boundary (see ``pixedit.core.editor``) converts them to
plain strings; nothing typed escapes past that point.

Hierarchy
---------
- PixeditError
    - IngestionError: reading the selected file failed
    - ValidationError: an image and a non-empty instruction are required
    - RemoteCallError: transport failure or non-success response
    - NoImageProducedError: the response carried no image part
    - EditInProgressError: another edit is still outstanding
"""

GENERIC_READ_ERROR = "Failed to read the image file."
MISSING_INPUT_ERROR = "Please upload an image and provide a prompt."
NO_IMAGE_ERROR = "No image was generated in the API response."
UNKNOWN_REMOTE_ERROR = "An unknown error occurred while generating the image."
IN_PROGRESS_ERROR = "An edit is already in progress. Please wait for it to finish."


class PixeditError(Exception):
    """Base class for all user-facing Pixedit errors."""

    pass


class IngestionError(PixeditError):
    """The selected file could not be read."""

    def __init__(self, message: str = GENERIC_READ_ERROR) -> None:
        super().__init__(message)


class ValidationError(PixeditError):
    """User-friendly validation error.

    Raised before any network call when the request is incomplete.
    The message is intended to be displayed directly to the user.
    """

    pass


class RemoteCallError(PixeditError):
    """The remote generative service call failed."""

    pass


class NoImageProducedError(PixeditError):
    """The remote service answered without any image part."""

    def __init__(self, message: str = NO_IMAGE_ERROR) -> None:
        super().__init__(message)


class EditInProgressError(PixeditError):
    """A second edit was submitted while the first is still running."""

    def __init__(self, message: str = IN_PROGRESS_ERROR) -> None:
        super().__init__(message)
