from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError

from productframe.config import settings
from productframe.errors import DecodeError, EncodeOrWriteError

Image.MAX_IMAGE_PIXELS = settings.max_image_pixels


def decode_image(data: bytes, *, label: str = "image") -> Image.Image:
    """Decode raw PNG/JPEG/... bytes into an owned RGBA image."""
    if not data:
        raise DecodeError(f"{label}: empty buffer")
    try:
        with Image.open(io.BytesIO(data)) as img:
            return img.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise DecodeError(f"{label}: cannot decode image ({exc})") from exc


def encode_png(image: Image.Image) -> bytes:
    output = io.BytesIO()
    try:
        image.save(output, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodeOrWriteError(f"failed to encode PNG: {exc}") from exc
    return output.getvalue()
