"""Integration tests: upload -> submit -> result, with a mocked Gemini client.

These wire the real ingestion, editor, Gemini adapter and UI handlers
together. Only ``genai.Client`` is replaced.
"""

import base64
import io
from pathlib import Path

import pytest
from PIL import Image

from pixedit.core.adapters.gemini_image_edit import GeminiImageEditAdapter
from pixedit.core.editor import ImageEditor
from pixedit.core.errors import NO_IMAGE_ERROR
from pixedit.core.ingestion import read_uploaded_file
from pixedit.ui.handlers import handle_image_select, handle_submit, start_edit

pytestmark = pytest.mark.integration


@pytest.fixture
def jpeg_path(temp_dir) -> Path:
    buffer = io.BytesIO()
    Image.new("RGB", (16, 16), color=(10, 120, 200)).save(buffer, "JPEG")
    path = temp_dir / "cat.jpg"
    path.write_bytes(buffer.getvalue())
    return path


@pytest.fixture
def gemini_editor(test_config, mock_client) -> ImageEditor:
    return ImageEditor(GeminiImageEditAdapter(test_config, client=mock_client))


@pytest.mark.asyncio
async def test_upload_then_edit(jpeg_path, png_bytes, editor_state, gemini_editor, mock_client, make_response):
    mock_client.aio.models.generate_content.return_value = make_response(
        make_response.text_part("Made it red."),
        make_response.image_part(png_bytes, "image/png"),
    )
    editor_state.editor = gemini_editor

    *_, state = await handle_image_select(str(jpeg_path), "make it red", editor_state)
    *_, state = start_edit(state)
    edited, download, error, *_, state = await handle_submit("make it red", state)

    # Request carried the original JPEG bytes and the instruction
    contents = mock_client.aio.models.generate_content.await_args.kwargs["contents"]
    assert contents.parts[0].inline_data.data == jpeg_path.read_bytes()
    assert contents.parts[0].inline_data.mime_type == "image/jpeg"
    assert contents.parts[1].text == "make it red"

    # Result uses the response's media type and offers an edited-<name> download
    assert state.edited == "data:image/png;base64," + base64.b64encode(png_bytes).decode()
    assert isinstance(edited["value"], Image.Image)
    assert Path(download["value"]).name == "edited-cat.jpg"
    assert Path(download["value"]).read_bytes() == png_bytes
    assert error["visible"] is False


@pytest.mark.asyncio
async def test_no_image_response_surfaces_message(jpeg_path, gemini_editor, mock_client, make_response):
    mock_client.aio.models.generate_content.return_value = make_response(
        make_response.text_part("Sorry, I can only describe images.")
    )
    uploaded = await read_uploaded_file(jpeg_path)

    result = await gemini_editor.submit(uploaded, "make it red")

    assert not result.ok
    assert NO_IMAGE_ERROR in result.error


@pytest.mark.asyncio
async def test_transport_failure_surfaces_cause(jpeg_path, gemini_editor, mock_client):
    mock_client.aio.models.generate_content.side_effect = ConnectionRefusedError(
        "[Errno 111] Connection refused"
    )
    uploaded = await read_uploaded_file(jpeg_path)

    result = await gemini_editor.submit(uploaded, "make it red")

    assert result.error == "Failed to generate image: [Errno 111] Connection refused"
    assert not gemini_editor.in_flight


@pytest.mark.asyncio
async def test_empty_instruction_makes_no_call(jpeg_path, gemini_editor, mock_client):
    uploaded = await read_uploaded_file(jpeg_path)

    result = await gemini_editor.submit(uploaded, "   ")

    assert not result.ok
    mock_client.aio.models.generate_content.assert_not_awaited()
