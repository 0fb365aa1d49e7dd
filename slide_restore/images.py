import base64
from mimetypes import guess_type
from typing import Tuple

DEFAULT_MIME_TYPE = "image/jpeg"


def load_image(path: str) -> Tuple[bytes, str]:
    mime_type, _ = guess_type(path)
    if mime_type is None or not mime_type.startswith("image/"):
        mime_type = DEFAULT_MIME_TYPE
    with open(path, "rb") as f:
        return f.read(), mime_type


def decode_data_url(url: str) -> Tuple[bytes, str]:
    """
    Decode ``data:<mime>;base64,<payload>`` into raw bytes.

    A bare base64 string (no ``data:`` header) is accepted and assumed to be JPEG.
    """
    mime_type = DEFAULT_MIME_TYPE
    payload = url
    if "," in url:
        header, payload = url.split(",", 1)
        if header.startswith("data:"):
            declared = header[len("data:") :].split(";", 1)[0]
            if declared:
                mime_type = declared
    return base64.b64decode(payload), mime_type


def to_data_url(image: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> str:
    encoded = base64.b64encode(image).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"
