"""Configuration management for Pixedit.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the PIXEDIT_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (PIXEDIT_* prefix)
2. .env file in the project root
3. Default values defined in PixeditConfig

Example .env file:
    PIXEDIT_API_KEY=your-gemini-api-key
    PIXEDIT_MODEL_ID=gemini-2.5-flash-image
    PIXEDIT_GRADIO_SERVER_PORT=7860
    PIXEDIT_LOG_LEVEL=DEBUG

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time and
is used by the application entry point. Core components never read it
implicitly: the editor and its adapters receive a config object at
construction, so tests can pass their own.

Usage Example
-------------
    from pixedit.core.config import config
    from pixedit.core.edit_adapters import adapter_registry

    adapter = adapter_registry.instantiate(config.default_adapter, config)

Credential Handling
-------------------
`api_key` is the only credential. It is read once at startup and handed to the
Gemini client by the adapter. An empty key is allowed at load time so the UI
can start; the remote service rejects the call and the user sees the error.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PixeditConfig(BaseSettings):
    """Main configuration for Pixedit.

    Attributes
    ----------
    Remote Service Settings:
        api_key : str
            Credential for the Gemini API
        default_adapter : str
            Edit adapter to use (see ``adapter_registry``)
        model_id : str
            Gemini model used for image editing

    Upload Settings:
        accepted_file_types : list[str]
            File extensions offered by the upload picker

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Logging:
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level applied by the UI entry point

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = PixeditConfig(api_key="test-key", model_id="my-model")

    Use the global configuration instance:

        >>> from pixedit.core.config import config
        >>> print(config.default_adapter)
        'Gemini-Image-Edit'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PIXEDIT_",
        case_sensitive=False,
    )

    # Remote service settings
    api_key: str = Field(
        default="",
        description="API key for the Gemini image editing service",
    )
    default_adapter: str = Field(
        default="Gemini-Image-Edit",
        description="Edit adapter to use for image editing requests",
    )
    model_id: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model ID used for instruction-based editing",
    )

    # Upload settings
    accepted_file_types: list[str] = Field(
        default_factory=lambda: [".png", ".jpg", ".jpeg"],
        description="File extensions accepted by the upload picker",
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level for the application",
    )


# Global configuration instance
# Loads values from environment variables (PIXEDIT_* prefix) and .env file.
config = PixeditConfig()
