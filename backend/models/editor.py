from pydantic import BaseModel
from typing import Optional
from enum import Enum

DEFAULT_MIME_TYPE = "image/jpeg"

class EditorStatus(str, Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"

class EditorState(BaseModel):
    original: Optional[str] = None  # Data URL
    generated: Optional[str] = None  # Data URL
    mime_type: str = DEFAULT_MIME_TYPE
    prompt: str = ""
    status: EditorStatus = EditorStatus.IDLE
    error_message: Optional[str] = None

class DownloadPayload(BaseModel):
    filename: str
    mime_type: str
    content: bytes

class PromptPayload(BaseModel):
    prompt: str

class EditorStateResponse(BaseModel):
    success: bool
    session_id: Optional[str] = None
    state: Optional[EditorState] = None
    model: Optional[str] = None
    can_generate: bool = False
    can_download: bool = False
    error: Optional[str] = None

class DeleteSessionResponse(BaseModel):
    success: bool
    error: Optional[str] = None
