from __future__ import annotations

import logging
import math

from PIL import Image

from productframe.canvas.types import (
    U32_MAX,
    HeightResize,
    ResizeMode,
    ScaleResize,
    WidthResize,
)
from productframe.config import settings
from productframe.errors import InvalidArgument

logger = logging.getLogger(__name__)


def _to_u32(value: float) -> int:
    """Truncate, saturating at the u32 range; NaN becomes 0."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= U32_MAX:
        return U32_MAX
    return int(value)


def target_size(size: tuple[int, int], mode: ResizeMode) -> tuple[int, int]:
    """Compute (width, height) for `mode`, truncating derived dimensions.

    Width/Height keep the source aspect ratio using integer arithmetic, so the
    derived side is exactly floor(other * target / side). A zero-sized source
    yields a zero derived side. Results saturate to the 0..u32 range.
    """
    w, h = size

    if isinstance(mode, WidthResize):
        new_h = h * mode.target // w if w > 0 else 0
        return _to_u32(mode.target), _to_u32(new_h)

    if isinstance(mode, HeightResize):
        new_w = w * mode.target // h if h > 0 else 0
        return _to_u32(new_w), _to_u32(mode.target)

    if isinstance(mode, ScaleResize):
        return _to_u32(w * mode.factor), _to_u32(h * mode.factor)

    raise TypeError(f"unsupported resize mode: {mode!r}")


def resize_image(
    image: Image.Image,
    mode: ResizeMode | None,
    *,
    strict: bool | None = None,
) -> Image.Image:
    if mode is None:
        return image

    strict = settings.strict_resize if strict is None else strict
    new_w, new_h = target_size(image.size, mode)

    if new_w == 0 or new_h == 0 or image.width == 0 or image.height == 0:
        if strict:
            raise InvalidArgument(
                f"resize_mode {mode!r} produces a zero-area image from {image.size}"
            )
        logger.debug("resize %s on %s is degenerate; using empty image", mode, image.size)
        return Image.new("RGBA", (0, 0))

    # Palette and bilevel images would fall back to nearest-neighbour.
    if image.mode != "RGBA":
        image = image.convert("RGBA")

    logger.debug("resizing %s -> %s", image.size, (new_w, new_h))
    try:
        return image.resize((new_w, new_h), Image.Resampling.LANCZOS)
    except (ValueError, OverflowError, MemoryError) as exc:
        raise InvalidArgument(
            f"resize_mode {mode!r} cannot resize {image.size} to {(new_w, new_h)}: {exc}"
        ) from exc
