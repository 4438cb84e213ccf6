"""Core functionality for image editing.

This module provides the core components for Pixedit:

- **Image Ingestion**: reads a selected file into an `UploadedFile` data URL
- **Edit Adapters**: unified interface to remote generative services
- **adapter_registry**: registry for discovering and instantiating adapters
- **ImageEditor**: validates requests, guards against concurrent submits, and
  converts failures to user-facing messages
- **PixeditConfig**: configuration management using Pydantic Settings
- **config**: global configuration instance (loads from environment variables)

Usage Example
-------------
    from pixedit.core import ImageEditor, adapter_registry, config, read_uploaded_file

    uploaded = await read_uploaded_file("cat.jpg")
    editor = ImageEditor(adapter_registry.instantiate(config.default_adapter, config))
    result = await editor.submit(uploaded, "make it red")
    if result.ok:
        print(result.image[:40])
    else:
        print(result.error)
"""

# Import adapters to ensure they're registered
# This must happen after adapter_registry is imported
from pixedit.core.adapters import GeminiImageEditAdapter  # noqa: F401
from pixedit.core.config import PixeditConfig, config
from pixedit.core.edit_adapters import EditAdapterBase, adapter_registry
from pixedit.core.editor import EditResult, ImageEditor
from pixedit.core.ingestion import UploadedFile, read_uploaded_file

__all__ = [
    "EditAdapterBase",
    "EditResult",
    "ImageEditor",
    "PixeditConfig",
    "UploadedFile",
    "adapter_registry",
    "config",
    "read_uploaded_file",
]
