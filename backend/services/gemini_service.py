import httpx
from typing import Optional

from core.encoding import decode
from core.errors import ConfigurationError, RemoteServiceError
from models.gemini import GenerateContentResponse

# Gemini 2.5 Flash Image ("Nano Banana")
GEMINI_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_RESULT_MIME_TYPE = "image/png"

class GeminiImageEditService:
    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport
        self.model = GEMINI_IMAGE_MODEL

    @classmethod
    def from_settings(cls, settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "GeminiImageEditService":
        return cls(
            api_key=settings.GEMINI_API_KEY,
            base_url=settings.GEMINI_API_BASE_URL,
            timeout=settings.GEMINI_TIMEOUT_SECONDS,
            transport=transport
        )

    def check_configured(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, image_data: str, mime_type: str, prompt: str) -> dict:
        """Request body with the image part first and the instruction second"""
        _, base64_data = decode(image_data)

        # Image models reject responseMimeType / responseSchema, so no generationConfig
        return {
            "contents": [{
                "parts": [
                    {
                        "inline_data": {
                            "mime_type": mime_type,
                            "data": base64_data
                        }
                    },
                    {
                        "text": prompt
                    }
                ]
            }]
        }

    async def request_edit(self, image_data: str, mime_type: str, prompt: str) -> Optional[str]:
        """
        Edit an image with Gemini.

        Returns the first generated image as a data URL, or None when the model
        answered without an image. Raises ConfigurationError when no API key is
        set and RemoteServiceError for any transport or service failure.
        """
        if not self.api_key:
            raise ConfigurationError("API Key is missing")

        payload = self.build_payload(image_data, mime_type, prompt)
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json"
        }
        url = f"{self.base_url}/models/{self.model}:generateContent"

        print(f"🔍 Requesting image edit from {self.model} ({len(prompt)} char prompt)")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as error:
            print(f"❌ Gemini API Error: {error}")
            raise RemoteServiceError(str(error) or error.__class__.__name__) from error

        if response.status_code != 200:
            error_message = _extract_error_message(response)
            print(f"❌ Gemini API Error: {response.status_code} - {error_message}")
            raise RemoteServiceError(error_message, status_code=response.status_code)

        try:
            result = GenerateContentResponse.from_api(response.json())
        except (ValueError, AttributeError, TypeError) as error:
            print(f"❌ Gemini API returned a malformed response: {error}")
            raise RemoteServiceError(f"Malformed response from Gemini API: {error}") from error

        return first_image(result)

def first_image(result: GenerateContentResponse) -> Optional[str]:
    """Data URL for the first inline image of the first candidate, if any"""
    if not result.candidates:
        return None

    for part in result.candidates[0].parts:
        if part.kind == "inline_image":
            result_mime_type = part.mime_type or DEFAULT_RESULT_MIME_TYPE
            return f"data:{result_mime_type};base64,{part.data}"

    return None

def _extract_error_message(response: httpx.Response) -> str:
    try:
        error_data = response.json() if response.content else {}
    except ValueError:
        error_data = {}

    if isinstance(error_data, dict):
        error = error_data.get('error')
        if isinstance(error, dict) and error.get('message'):
            return error['message']
    return f"API request failed: {response.status_code}"
