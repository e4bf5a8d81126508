from fastapi import APIRouter
from config.settings import settings
from core.encoding import decode
from core.errors import ImageEditorError
from models.image_edit import ImageEditRequest, ImageEditResponse, ConfigStatusResponse
from services.gemini_service import GeminiImageEditService
import time

router = APIRouter(prefix="/image-edit", tags=["image-edit"])

def get_gemini_service():
    return GeminiImageEditService.from_settings(settings)

@router.post("/", response_model=ImageEditResponse)
async def edit_image(edit_request: ImageEditRequest):
    """Edit a single image with Gemini without keeping any editor state"""
    start_time = time.time()

    if not edit_request.prompt.strip():
        return ImageEditResponse(success=False, error="Please enter a prompt.")

    # Prefer the MIME type embedded in the data URL
    embedded_mime_type, _ = decode(edit_request.image_data)
    mime_type = edit_request.mime_type or embedded_mime_type or "image/jpeg"

    try:
        gemini_service = get_gemini_service()
        result_image = await gemini_service.request_edit(
            edit_request.image_data,
            mime_type,
            edit_request.prompt
        )
    except ImageEditorError as e:
        return ImageEditResponse(success=False, error=str(e))
    except Exception as e:
        return ImageEditResponse(success=False, error=f"Server error: {str(e)}")

    if not result_image:
        return ImageEditResponse(success=False, error="No image generated.")

    processing_time = int(time.time() - start_time)
    print(f"✅ Image edit finished in {processing_time}s")

    return ImageEditResponse(
        success=True,
        image_data=result_image,
        model=gemini_service.model,
        processing_time_seconds=processing_time,
        error=None
    )

@router.get("/health", response_model=ConfigStatusResponse)
async def check_gemini_config():
    """Check if the Gemini API key is configured"""
    gemini_service = get_gemini_service()
    has_key = gemini_service.check_configured()

    return ConfigStatusResponse(
        configured=has_key,
        model=gemini_service.model,
        message="Gemini API key configured" if has_key else "Gemini API key not set"
    )
