import httpx
from typing import Optional, Tuple

from core.encoding import encode
from core.errors import ReadError

SAMPLE_FALLBACK_MIME_TYPE = "image/jpeg"

class SampleImageService:
    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "SampleImageService":
        return cls(
            url=settings.SAMPLE_IMAGE_URL,
            timeout=settings.SAMPLE_TIMEOUT_SECONDS,
            transport=transport
        )

    async def fetch(self) -> Tuple[str, str]:
        """Download the sample image and return it as (data URL, MIME type)"""
        print(f"🔍 Fetching sample image: {self.url}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport, follow_redirects=True) as client:
                response = await client.get(self.url)
        except httpx.HTTPError as error:
            raise ReadError(f"Failed to download sample image: {error}") from error

        if response.status_code != 200:
            raise ReadError(f"Failed to download sample image: {response.status_code}")

        content = response.content
        if len(content) == 0:
            raise ReadError("Downloaded sample image is empty")

        content_type = response.headers.get("content-type", "")
        mime_type = content_type.split(";")[0].strip() or SAMPLE_FALLBACK_MIME_TYPE
        return encode(content, mime_type), mime_type
