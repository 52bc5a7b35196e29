from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from PIL import Image

from productframe.canvas.codec import decode_image, encode_png
from productframe.canvas.options import parse_background_color, parse_options
from productframe.canvas.position import calculate_position
from productframe.canvas.resize import resize_image
from productframe.canvas.types import (
    BackgroundColor,
    CenterOffset,
    CompositeOptions,
    OffsetMode,
    Position,
    ResizeMode,
)
from productframe.config import settings
from productframe.storage.local import read_input_file, save_result_file

logger = logging.getLogger(__name__)


def create_canvas(
    size: tuple[int, int],
    color: BackgroundColor | Sequence[int] | bytes,
) -> Image.Image:
    """Allocate an RGBA canvas filled with `color`, alpha included."""
    background = parse_background_color(color)
    return Image.new("RGBA", size, background.as_tuple())


def paint_over(canvas: Image.Image, layer: Image.Image, position: Position) -> None:
    """Alpha-composite `layer` onto `canvas` in place, clipping to bounds."""
    if layer.mode != "RGBA":
        layer = layer.convert("RGBA")

    left = max(position.x, 0)
    top = max(position.y, 0)
    right = min(position.x + layer.width, canvas.width)
    bottom = min(position.y + layer.height, canvas.height)
    if right <= left or bottom <= top:
        return

    src_box = (left - position.x, top - position.y, right - position.x, bottom - position.y)
    canvas.alpha_composite(layer, dest=(left, top), source=src_box)


def compose(
    product_image: Image.Image,
    overlay_image: Image.Image,
    background_color: BackgroundColor | Sequence[int] | bytes,
    resize_mode: ResizeMode | None = None,
    offset_mode: OffsetMode | None = None,
) -> Image.Image:
    """Build the three-layer composite: background, product, then overlay.

    The canvas takes the overlay's exact size. Neither input image is mutated.
    """
    product = resize_image(product_image, resize_mode)

    canvas = create_canvas(overlay_image.size, background_color)

    product_pos = calculate_position(offset_mode or CenterOffset(), product.size, canvas.size)
    paint_over(canvas, product, product_pos)

    # Overlay placement is fixed; with canvas == overlay size this is (0, 0).
    overlay_pos = calculate_position(CenterOffset(), overlay_image.size, canvas.size)
    paint_over(canvas, overlay_image, overlay_pos)

    logger.debug(
        "composed product %s at (%d, %d) under overlay %s",
        product.size,
        product_pos.x,
        product_pos.y,
        overlay_image.size,
    )
    return canvas


def render_composite(
    product_bytes: bytes,
    overlay_bytes: bytes,
    options: Mapping[str, Any] | CompositeOptions,
) -> Image.Image:
    opts = parse_options(options)
    product = decode_image(product_bytes, label="product image")
    overlay = decode_image(overlay_bytes, label="overlay image")
    logger.info("decoded product %s and overlay %s", product.size, overlay.size)

    return compose(
        product,
        overlay,
        opts.background_color,
        resize_mode=opts.resize_mode,
        offset_mode=opts.offset_mode,
    )


def build_composited_image(
    product_bytes: bytes,
    overlay_bytes: bytes,
    options: Mapping[str, Any] | CompositeOptions,
    output_path: str | Path | None = None,
) -> Path:
    """Decode, composite, encode as PNG and write to `output_path`.

    Defaults to `settings.output_path`. Returns the written path.
    """
    result = render_composite(product_bytes, overlay_bytes, options)
    destination = save_result_file(encode_png(result), output_path or settings.output_path)
    logger.info("composite %s written to %s", result.size, destination)
    return destination


def run_composite_job(
    product_path: str | Path,
    overlay_path: str | Path,
    options: Mapping[str, Any] | CompositeOptions,
    output_path: str | Path | None = None,
) -> Path:
    product_bytes = read_input_file(product_path, label="product image")
    overlay_bytes = read_input_file(overlay_path, label="overlay image")
    return build_composited_image(product_bytes, overlay_bytes, options, output_path)
