from typing import Optional

from fastapi import UploadFile

from core.encoding import decode_bytes, encode_upload, extension_for
from core.errors import ImageEditorError, ReadError, ValidationError
from models.editor import DEFAULT_MIME_TYPE, DownloadPayload, EditorState, EditorStatus
from services.gemini_service import GeminiImageEditService
from services.sample_service import SampleImageService

SAMPLE_PROMPT = "Add a tophat on top of the monkeys head"
DOWNLOAD_BASENAME = "banana-edit-result"

UPLOAD_FAILED_MESSAGE = "Failed to read file."
SAMPLE_FAILED_MESSAGE = "Failed to load sample image."
NO_IMAGE_MESSAGE = "Please upload an image first."
NO_PROMPT_MESSAGE = "Please enter a prompt."
NO_RESULT_MESSAGE = "No image generated."
GENERIC_FAILURE_MESSAGE = "Failed to generate image. Please try again."

class EditorService:
    """
    State of one editing session and the user actions that change it.

    Every action catches its own failures and records them in
    state.error_message, so callers only ever read state.
    """

    def __init__(self, edit_client: GeminiImageEditService, sample_client: Optional[SampleImageService] = None):
        self.edit_client = edit_client
        self.sample_client = sample_client
        self.state = EditorState()

    @property
    def can_generate(self) -> bool:
        return (
            self.state.original is not None
            and bool(self.state.prompt.strip())
            and self.state.status != EditorStatus.LOADING
        )

    @property
    def can_download(self) -> bool:
        return self.state.status == EditorStatus.SUCCESS and self.state.generated is not None

    def upload_image(self, image_data: str, mime_type: str) -> EditorState:
        """Use an already encoded image as the new original"""
        self.state.original = image_data
        self.state.generated = None
        self.state.mime_type = mime_type or DEFAULT_MIME_TYPE
        self.state.status = EditorStatus.IDLE
        self.state.error_message = None
        return self.state

    async def upload_file(self, upload: UploadFile) -> EditorState:
        try:
            image_data = await encode_upload(upload)
        except ReadError as error:
            print(f"❌ Upload failed: {error}")
            self.state.error_message = UPLOAD_FAILED_MESSAGE
            self.state.status = EditorStatus.ERROR
            return self.state

        return self.upload_image(image_data, upload.content_type)

    async def load_sample(self) -> EditorState:
        self.state.status = EditorStatus.LOADING
        try:
            if self.sample_client is None:
                raise ReadError("No sample image source configured")
            image_data, mime_type = await self.sample_client.fetch()
        except Exception as error:
            if isinstance(error, ImageEditorError):
                print(f"⚠️ Sample image unavailable: {error}")
            else:
                print(f"❌ Unexpected error while loading sample: {error!r}")
            self.state.error_message = SAMPLE_FAILED_MESSAGE
            self.state.status = EditorStatus.IDLE
            return self.state

        self.state.original = image_data
        self.state.generated = None
        self.state.mime_type = mime_type
        self.state.prompt = SAMPLE_PROMPT
        self.state.status = EditorStatus.IDLE
        return self.state

    def set_prompt(self, prompt: str) -> EditorState:
        self.state.prompt = prompt
        return self.state

    def clear_image(self) -> EditorState:
        self.state.original = None
        self.state.generated = None
        self.state.mime_type = DEFAULT_MIME_TYPE
        self.state.prompt = ""
        return self.state

    def validate(self) -> None:
        if not self.state.original:
            raise ValidationError(NO_IMAGE_MESSAGE)
        if not self.state.prompt.strip():
            raise ValidationError(NO_PROMPT_MESSAGE)

    async def generate(self) -> EditorState:
        try:
            self.validate()
        except ValidationError as error:
            self.state.error_message = str(error)
            return self.state

        self.state.status = EditorStatus.LOADING
        self.state.error_message = None

        try:
            result = await self.edit_client.request_edit(
                self.state.original,
                self.state.mime_type,
                self.state.prompt
            )
        except Exception as error:
            if not isinstance(error, ImageEditorError):
                print(f"❌ Unexpected error during generation: {error!r}")
            self.state.error_message = str(error) or GENERIC_FAILURE_MESSAGE
            self.state.status = EditorStatus.ERROR
            return self.state

        if result is None:
            print("⚠️ Gemini answered without an image")
            self.state.error_message = NO_RESULT_MESSAGE
            self.state.status = EditorStatus.ERROR
            return self.state

        print("✅ Image edit completed")
        self.state.generated = result
        self.state.status = EditorStatus.SUCCESS
        return self.state

    def download(self) -> Optional[DownloadPayload]:
        """Bytes and file name for saving the generated image"""
        if not self.state.generated:
            return None

        mime_type, content = decode_bytes(self.state.generated)
        mime_type = mime_type or "image/png"
        return DownloadPayload(
            filename=f"{DOWNLOAD_BASENAME}.{extension_for(mime_type)}",
            mime_type=mime_type,
            content=content
        )
