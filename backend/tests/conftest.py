"""
Shared pytest fixtures and configuration for all tests
"""
import base64
import json
import pytest
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import httpx

# Add backend to Python path for imports
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Smallest valid-looking payloads; the code never parses pixels
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00original-image\xff\xd9"
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDRedited-image"


def gemini_image_response(data: bytes = PNG_BYTES, mime_type: str = "image/png") -> dict:
    """Body of a generateContent answer holding a text part and one image part"""
    inline = {"data": base64.b64encode(data).decode("ascii")}
    if mime_type:
        inline["mimeType"] = mime_type
    return {
        "candidates": [{
            "content": {
                "role": "model",
                "parts": [
                    {"text": "Here is your edited image."},
                    {"inlineData": inline}
                ]
            },
            "finishReason": "STOP"
        }]
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served"""

    def __init__(self, handler):
        self.requests = []

        def recording_handler(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def jpeg_data_url():
    return "data:image/jpeg;base64," + base64.b64encode(JPEG_BYTES).decode("ascii")


@pytest.fixture
def png_base64():
    return base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.fixture
def gemini_transport():
    """Transport answering every request with one PNG image"""
    return RecordingTransport(lambda request: httpx.Response(200, json=gemini_image_response()))


@pytest.fixture
def gemini_service(gemini_transport):
    from services.gemini_service import GeminiImageEditService
    return GeminiImageEditService(
        api_key="test-key",
        base_url="https://gemini.test/v1beta",
        transport=gemini_transport
    )


@pytest.fixture
def fake_edit_client():
    """Edit client double whose request_edit is an AsyncMock"""
    from services.gemini_service import GEMINI_IMAGE_MODEL
    client = AsyncMock()
    client.model = GEMINI_IMAGE_MODEL
    client.request_edit = AsyncMock(return_value=None)
    return client


@pytest.fixture
def sample_transport():
    return RecordingTransport(
        lambda request: httpx.Response(200, content=JPEG_BYTES, headers={"content-type": "image/jpeg"})
    )


@pytest.fixture
def sample_service(sample_transport):
    from services.sample_service import SampleImageService
    return SampleImageService(url="https://samples.test/monkey.jpg", transport=sample_transport)


@pytest.fixture
def editor(fake_edit_client, sample_service):
    from services.editor_service import EditorService
    return EditorService(fake_edit_client, sample_service)
