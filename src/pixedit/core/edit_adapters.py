"""Base class and registry for edit adapters.

An edit adapter turns an `UploadedFile` plus a free-text instruction into a new
image by calling a remote generative service. Each service gets its own
adapter implementing a common interface, so the editor and the UI never talk
to a vendor SDK directly.

Adapter Contract
----------------
- Construction receives the configuration explicitly; adapters never read
  ambient environment state.
- ``edit()`` is a coroutine that resolves to a data URL built from the first
  image the service returns.
- Every failure surfaces as a `PixeditError` subclass whose message is fit for
  display (`RemoteCallError`, `NoImageProducedError`).
- Adapters hold no per-request state; concurrency control belongs to the
  editor.

Usage Example
-------------
    >>> from pixedit.core.edit_adapters import adapter_registry
    >>> from pixedit.core.config import config
    >>>
    >>> print(adapter_registry.list_available())
    ['Gemini-Image-Edit']
    >>>
    >>> adapter = adapter_registry.instantiate("Gemini-Image-Edit", config)
    >>> data_url = await adapter.edit(uploaded, "make the sky purple")

See Also
--------
- GeminiImageEditAdapter: Google Gemini implementation
- ImageEditor: single-flight boundary that converts errors to messages
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from .config import PixeditConfig
from .ingestion import UploadedFile

logger = logging.getLogger(__name__)


class EditAdapterBase(ABC):
    """Abstract base class for all edit adapters.

    Attributes
    ----------
    name : str
        Registry name of the adapter (e.g., "Gemini-Image-Edit")
    description : str
        Brief description of the backing service
    config : PixeditConfig
        Configuration object containing credential and model settings
    """

    name: str = "Base Edit Adapter"
    description: str = "Base class for edit adapters"
    version: str = "0.1.0"

    def __init__(self, config: PixeditConfig) -> None:
        """Initialize the edit adapter.

        Args:
            config: Configuration object containing service settings
        """
        self.config = config
        logger.info(f"Initialized {self.name} adapter")

    @abstractmethod
    async def edit(self, image: UploadedFile, instruction: str) -> str:
        """Edit an image according to a natural-language instruction.

        Args:
            image: The ingested source image
            instruction: Free-text editing instruction

        Returns
        -------
        str
            Data URL of the edited image, tagged with the media type the
            service reported for it

        Raises
        ------
        RemoteCallError
            If the call fails or the response cannot be read
        NoImageProducedError
            If the response holds no image part
        """
        pass

    def get_adapter_info(self) -> dict[str, Any]:
        """Get information about this adapter."""
        return {
            "name": self.name,
            "description": self.description,
            "version": self.version,
        }


class EditAdapterRegistry:
    """Registry for managing available edit adapters.

    Usage
    -----
    Registering a new adapter:

        >>> adapter_registry.register(MyServiceAdapter)

    Instantiating an adapter:

        >>> adapter = adapter_registry.instantiate("Gemini-Image-Edit", config)
    """

    def __init__(self) -> None:
        self._adapters: dict[str, type[EditAdapterBase]] = {}

    def register(self, adapter_class: type[EditAdapterBase]) -> None:
        """Register an edit adapter class.

        Re-registering a name overwrites the previous class with a warning.
        """
        adapter_name = adapter_class.name

        if adapter_name in self._adapters:
            logger.warning(f"Edit adapter '{adapter_name}' is already registered, overwriting")

        self._adapters[adapter_name] = adapter_class
        logger.debug(f"Registered edit adapter: {adapter_name}")

    def instantiate(self, adapter_name: str, config: PixeditConfig, **kwargs) -> EditAdapterBase:
        """Create an instance of a registered edit adapter.

        Args:
            adapter_name: Name of the adapter to instantiate
            config: Configuration object
            **kwargs: Extra keyword arguments for the adapter constructor

        Returns
        -------
        EditAdapterBase
            New instance of the specified adapter

        Raises
        ------
        KeyError
            If adapter_name is not registered
        """
        if adapter_name not in self._adapters:
            available = ", ".join(self.list_available())
            raise KeyError(
                f"Edit adapter '{adapter_name}' not found. Available adapters: {available}"
            )

        instance = self._adapters[adapter_name](config=config, **kwargs)
        logger.info(f"Instantiated edit adapter: {adapter_name}")
        return instance

    def get_adapter_class(self, adapter_name: str) -> type[EditAdapterBase] | None:
        """Get the adapter class for a given name, or None if unknown."""
        return self._adapters.get(adapter_name)

    def list_available(self) -> list[str]:
        """List all registered adapter names."""
        return list(self._adapters.keys())

    def get_adapter_info(self, adapter_name: str) -> dict[str, Any] | None:
        """Get metadata about a registered adapter, or None if unknown."""
        adapter_class = self._adapters.get(adapter_name)
        if adapter_class is None:
            return None

        return {
            "name": adapter_class.name,
            "description": adapter_class.description,
            "version": adapter_class.version,
        }


# Global edit adapter registry instance
adapter_registry = EditAdapterRegistry()
