"""
Data URL helpers for images.

An encoded image is a string like "data:image/png;base64,iVBORw0KGg...". The
same string is what the browser shows in an <img> tag and what is sent to
Gemini once the prefix is stripped.
"""

import base64
import binascii
from typing import Optional, Tuple

from fastapi import UploadFile

from core.errors import ReadError

DEFAULT_MIME_TYPE = "application/octet-stream"
DATA_PREFIX = "data:"
DATA_URL_MARKER = ";base64,"
BASE64_MARKER = "base64,"

# File extensions for the image types we expect to hand back to users
EXTENSION_MAP = {
    'image/png': 'png',
    'image/jpeg': 'jpg',
    'image/jpg': 'jpg',
    'image/gif': 'gif',
    'image/webp': 'webp'
}


def encode(data: bytes, mime_type: str) -> str:
    """Build a data URL from raw bytes"""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


async def encode_upload(upload: UploadFile) -> str:
    """Read an uploaded file and return it as a data URL"""
    try:
        data = await upload.read()
    except Exception as error:
        raise ReadError(f"Could not read uploaded file: {error}") from error

    return encode(data, upload.content_type or DEFAULT_MIME_TYPE)


def decode(encoded: str) -> Tuple[Optional[str], str]:
    """
    Split a data URL into its MIME type and base64 payload.

    The MIME type is everything between "data:" and the last ";base64,", kept
    verbatim. Strings that are not data URLs are treated as an already raw
    payload and come back with no MIME type.
    """
    if encoded.startswith(DATA_PREFIX) and DATA_URL_MARKER in encoded:
        # Base64 never contains ";", so the last marker ends the header
        header, payload = encoded.rsplit(DATA_URL_MARKER, 1)
        return header[len(DATA_PREFIX):], payload

    if BASE64_MARKER in encoded:
        return None, encoded.split(BASE64_MARKER, 1)[1]
    return None, encoded


def decode_bytes(encoded: str) -> Tuple[Optional[str], bytes]:
    """Decode a data URL all the way to raw bytes"""
    mime_type, payload = decode(encoded)
    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as error:
        raise ReadError(f"Invalid base64 image data: {error}") from error


def extension_for(mime_type: Optional[str], default: str = "png") -> str:
    return EXTENSION_MAP.get(mime_type or "", default)
