"""Image payload helpers."""

import base64
import binascii


def detect_mime_type(image_bytes: bytes, default: str = "image/png") -> str:
    """Detect image format from magic bytes."""
    if image_bytes[:3] == b'\xff\xd8\xff':
        return "image/jpeg"
    if image_bytes[:8] == b'\x89PNG\r\n\x1a\n':
        return "image/png"
    if image_bytes[:4] == b'RIFF' and image_bytes[8:12] == b'WEBP':
        return "image/webp"
    if image_bytes[:6] in (b'GIF87a', b'GIF89a'):
        return "image/gif"
    return default


def to_data_uri(b64_payload: str) -> str:
    """Wrap a base64 image payload in a data URI with the sniffed MIME type."""
    try:
        head = base64.b64decode(b64_payload[:64], validate=False)
    except (binascii.Error, ValueError):
        head = b""
    return f"data:{detect_mime_type(head)};base64,{b64_payload}"
