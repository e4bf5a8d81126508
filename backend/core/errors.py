"""
Error types raised by the image editor core.

Every failure the editor can surface to a user is one of these. The editor
service catches them at the boundary of each user action and turns them into
a readable message on the editor state.
"""


class ImageEditorError(Exception):
    """Base class for editor errors"""


class ReadError(ImageEditorError):
    """A local file or fetched blob could not be read or decoded"""


class ConfigurationError(ImageEditorError):
    """A required setting, such as the Gemini API key, is missing"""


class RemoteServiceError(ImageEditorError):
    """The remote generation call failed (network, auth, quota, bad response)"""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(ImageEditorError):
    """User input is not sufficient to start a generation"""
