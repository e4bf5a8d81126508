from fastapi import APIRouter, HTTPException, UploadFile, File
from fastapi.responses import Response

from config.settings import settings
from core.sessions import get_session_store
from models.editor import DeleteSessionResponse, EditorStateResponse, PromptPayload
from services.editor_service import EditorService
from services.gemini_service import GeminiImageEditService
from services.sample_service import SampleImageService

router = APIRouter(prefix="/editor", tags=["editor"])

def get_gemini_service():
    return GeminiImageEditService.from_settings(settings)

def get_sample_service():
    return SampleImageService.from_settings(settings)

def get_editor_session(session_id: str) -> EditorService:
    session = get_session_store().get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Editor session '{session_id}' not found")
    return session

def build_state_response(session_id: str, session: EditorService) -> EditorStateResponse:
    return EditorStateResponse(
        success=True,
        session_id=session_id,
        state=session.state,
        model=session.edit_client.model,
        can_generate=session.can_generate,
        can_download=session.can_download,
        error=session.state.error_message
    )

@router.post("/sessions", response_model=EditorStateResponse)
async def create_session():
    """Start a new editing session with an empty editor"""
    session = EditorService(get_gemini_service(), get_sample_service())
    session_id = get_session_store().create(session)
    return build_state_response(session_id, session)

@router.get("/sessions/{session_id}", response_model=EditorStateResponse)
async def get_session(session_id: str):
    session = get_editor_session(session_id)
    return build_state_response(session_id, session)

@router.delete("/sessions/{session_id}", response_model=DeleteSessionResponse)
async def delete_session(session_id: str):
    if not get_session_store().delete(session_id):
        raise HTTPException(status_code=404, detail=f"Editor session '{session_id}' not found")
    return DeleteSessionResponse(success=True)

@router.post("/sessions/{session_id}/image", response_model=EditorStateResponse)
async def upload_image(session_id: str, file: UploadFile = File(...)):
    """Upload the original image for a session"""
    session = get_editor_session(session_id)

    if not file.content_type or not file.content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="Only image files are supported")
    if file.size is not None and file.size > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(status_code=413, detail="Image is too large")

    await session.upload_file(file)
    return build_state_response(session_id, session)

@router.post("/sessions/{session_id}/sample", response_model=EditorStateResponse)
async def load_sample(session_id: str):
    """Load the demo sample image and its suggested prompt"""
    session = get_editor_session(session_id)
    await session.load_sample()
    return build_state_response(session_id, session)

@router.put("/sessions/{session_id}/prompt", response_model=EditorStateResponse)
async def set_prompt(session_id: str, payload: PromptPayload):
    session = get_editor_session(session_id)
    session.set_prompt(payload.prompt)
    return build_state_response(session_id, session)

@router.delete("/sessions/{session_id}/image", response_model=EditorStateResponse)
async def clear_image(session_id: str):
    session = get_editor_session(session_id)
    session.clear_image()
    return build_state_response(session_id, session)

@router.post("/sessions/{session_id}/generate", response_model=EditorStateResponse)
async def generate(session_id: str):
    """Run the edit for the session's image and prompt"""
    session = get_editor_session(session_id)
    await session.generate()
    return build_state_response(session_id, session)

@router.get("/sessions/{session_id}/download")
async def download(session_id: str):
    """Return the generated image as a file attachment"""
    session = get_editor_session(session_id)
    payload = session.download()
    if payload is None:
        raise HTTPException(status_code=404, detail="No generated image to download")

    return Response(
        content=payload.content,
        media_type=payload.mime_type,
        headers={"Content-Disposition": f'attachment; filename="{payload.filename}"'}
    )
