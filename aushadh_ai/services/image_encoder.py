import base64
import binascii
import re
from typing import Any, Dict, Optional, Tuple

from aushadh_ai.core.gemini_config import MAX_IMAGE_BYTES

# image types Gemini accepts as inline data
ALLOWED_MIME_TYPES = {"image/jpeg", "image/png", "image/webp", "image/heic", "image/heif"}

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,", re.IGNORECASE)

class ImageError(ValueError):
    pass

def split_data_url(data: str) -> Tuple[Optional[str], str]:
    """'data:image/png;base64,AAAA' -> ('image/png', 'AAAA'); plain base64 passes through."""
    data = (data or "").strip()
    m = _DATA_URL_RE.match(data)
    if not m:
        return None, data
    return m.group("mime").lower(), data[m.end():]

def decode_image(data: str, mime_type: str = "image/jpeg") -> Tuple[bytes, str]:
    url_mime, payload = split_data_url(data)
    mime = (url_mime or mime_type or "").strip().lower()
    if mime == "image/jpg":
        mime = "image/jpeg"
    if mime not in ALLOWED_MIME_TYPES:
        raise ImageError(f"Unsupported image type '{mime}'. Use JPEG, PNG, WEBP or HEIC.")
    if not payload:
        raise ImageError("No image data received.")

    try:
        raw = base64.b64decode("".join(payload.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageError("Image data is not valid base64.") from e

    if not raw:
        raise ImageError("No image data received.")
    if len(raw) > MAX_IMAGE_BYTES:
        raise ImageError(f"Image is too large ({len(raw)} bytes, limit {MAX_IMAGE_BYTES}).")
    return raw, mime

def encode_image_part(image: bytes, mime_type: str = "image/jpeg") -> Dict[str, Any]:
    return {
        "inlineData": {
            "mimeType": mime_type,
            "data": base64.b64encode(image).decode("ascii"),
        }
    }
