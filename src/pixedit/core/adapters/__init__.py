"""Edit adapter implementations.

Importing this package registers every adapter with ``adapter_registry``.
"""

from .gemini_image_edit import GeminiImageEditAdapter

__all__ = ["GeminiImageEditAdapter"]
