from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image


def _png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def solid():
    def make(size: tuple[int, int], color: tuple[int, int, int, int]) -> Image.Image:
        return Image.new("RGBA", size, color)

    return make


@pytest.fixture
def gradient():
    def make(size: tuple[int, int]) -> Image.Image:
        w, h = size
        xs = np.linspace(0, 255, w, dtype=np.float32)[None, :]
        ys = np.linspace(0, 255, h, dtype=np.float32)[:, None]
        rgba = np.zeros((h, w, 4), dtype=np.uint8)
        rgba[:, :, 0] = xs.astype(np.uint8)
        rgba[:, :, 1] = ys.astype(np.uint8)
        rgba[:, :, 2] = ((xs + ys) / 2).astype(np.uint8)
        rgba[:, :, 3] = 255
        return Image.fromarray(rgba)

    return make


@pytest.fixture
def png_bytes():
    return _png


@pytest.fixture
def framed_overlay():
    """Opaque white border, fully transparent interior."""

    def make(size: tuple[int, int], border: int) -> Image.Image:
        w, h = size
        rgba = np.zeros((h, w, 4), dtype=np.uint8)
        rgba[:border, :] = (255, 255, 255, 255)
        rgba[h - border :, :] = (255, 255, 255, 255)
        rgba[:, :border] = (255, 255, 255, 255)
        rgba[:, w - border :] = (255, 255, 255, 255)
        return Image.fromarray(rgba)

    return make
