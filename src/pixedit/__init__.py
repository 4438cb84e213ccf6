"""Pixedit - Edit photos with natural-language instructions using Gemini."""

__version__ = "0.1.0"

from pixedit.core.config import PixeditConfig, config
from pixedit.core.edit_adapters import EditAdapterBase, adapter_registry

# Import adapters to ensure they're registered
from pixedit.core.adapters import GeminiImageEditAdapter  # noqa: F401

__all__ = [
    "EditAdapterBase",
    "adapter_registry",
    "PixeditConfig",
    "config",
    "GeminiImageEditAdapter",
]
