"""Shared pytest fixtures for Pixedit tests."""

import io
import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace
from typing import Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from pixedit.core.config import PixeditConfig
from pixedit.core.edit_adapters import EditAdapterBase
from pixedit.core.ingestion import UploadedFile, to_data_url
from pixedit.ui.models import EditorState


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config() -> PixeditConfig:
    """Create a test configuration that ignores any local .env file.

    Returns:
        PixeditConfig instance for testing
    """
    return PixeditConfig(
        _env_file=None,
        api_key="test-key",
        model_id="gemini-test-model",
    )


@pytest.fixture
def png_bytes() -> bytes:
    """A small real PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(buffer, "PNG")
    return buffer.getvalue()


@pytest.fixture
def cat_upload() -> UploadedFile:
    """The JPEG upload from the end-to-end scenario."""
    return UploadedFile(
        data="data:image/jpeg;base64,AAAA",
        media_type="image/jpeg",
        name="cat.jpg",
    )


@pytest.fixture
def png_upload(png_bytes: bytes) -> UploadedFile:
    """An upload holding a decodable PNG."""
    return UploadedFile(
        data=to_data_url(png_bytes, "image/png"),
        media_type="image/png",
        name="photo.png",
    )


@pytest.fixture
def make_response() -> Callable[..., SimpleNamespace]:
    """Factory for fake generate_content responses.

    Each positional argument is a part, built with ``text_part`` or
    ``image_part`` from the returned factory's attributes.
    """

    def _make_response(*parts) -> SimpleNamespace:
        content = SimpleNamespace(role="model", parts=list(parts))
        return SimpleNamespace(candidates=[SimpleNamespace(content=content)])

    def text_part(text: str) -> SimpleNamespace:
        return SimpleNamespace(text=text, inline_data=None)

    def image_part(data: bytes | str, mime_type: str | None) -> SimpleNamespace:
        return SimpleNamespace(
            text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type)
        )

    _make_response.text_part = text_part
    _make_response.image_part = image_part
    return _make_response


@pytest.fixture
def mock_client() -> MagicMock:
    """A genai.Client stand-in whose async generate_content is an AsyncMock."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    return client


class StubEditAdapter(EditAdapterBase):
    """Edit adapter returning a fixed result without any network access."""

    name = "Stub-Edit"
    description = "Returns a canned image"

    def __init__(self, config: PixeditConfig, result: str = "", error: Exception | None = None):
        super().__init__(config)
        self.result = result
        self.error = error
        self.calls: list[tuple[UploadedFile, str]] = []

    async def edit(self, image: UploadedFile, instruction: str) -> str:
        self.calls.append((image, instruction))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def make_stub_adapter(test_config: PixeditConfig) -> Callable[..., StubEditAdapter]:
    """Factory for stub adapters with a chosen result or error."""

    def _make(result: str = "", error: Exception | None = None) -> StubEditAdapter:
        return StubEditAdapter(test_config, result=result, error=error)

    return _make


@pytest.fixture
def stub_adapter(make_stub_adapter, png_bytes: bytes) -> StubEditAdapter:
    """Stub adapter that answers with a PNG data URL."""
    return make_stub_adapter(result=to_data_url(png_bytes, "image/png"))


@pytest.fixture
def editor_state() -> EditorState:
    """Create empty UI state for testing.

    Returns:
        EditorState instance
    """
    return EditorState()
