from pydantic import BaseModel
from typing import Optional

class ImageEditRequest(BaseModel):
    image_data: str  # Data URL or raw base64
    prompt: str
    mime_type: Optional[str] = None

class ImageEditResponse(BaseModel):
    success: bool
    image_data: Optional[str] = None  # Data URL
    model: Optional[str] = None
    processing_time_seconds: Optional[int] = None
    error: Optional[str] = None

class ConfigStatusResponse(BaseModel):
    configured: bool
    model: str
    message: str
