from __future__ import annotations

import math

from productframe.canvas.types import (
    I64_MAX,
    I64_MIN,
    CenterOffset,
    OffsetMode,
    PercentOffset,
    PixelOffset,
    Position,
)


def _to_i64(value: float) -> int:
    """Truncate toward zero, saturating at the i64 range; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if value >= I64_MAX:
        return I64_MAX
    if value <= I64_MIN:
        return I64_MIN
    return int(value)


def calculate_position(
    offset: OffsetMode,
    element_size: tuple[int, int],
    canvas_size: tuple[int, int],
) -> Position:
    """Return the top-left corner at which an element is painted.

    `Pixel` and `Percent` name the element's center and may produce negative
    or out-of-bounds corners. `Center` floors each axis at zero, so an element
    larger than the canvas is pinned to the top/left edge instead.
    """
    elem_w, elem_h = element_size
    canvas_w, canvas_h = canvas_size

    if isinstance(offset, PixelOffset):
        return Position(x=offset.x - elem_w // 2, y=offset.y - elem_h // 2)

    if isinstance(offset, PercentOffset):
        x_pos = canvas_w * offset.x / 100.0 - elem_w / 2.0
        y_pos = canvas_h * offset.y / 100.0 - elem_h / 2.0
        return Position(x=_to_i64(x_pos), y=_to_i64(y_pos))

    if isinstance(offset, CenterOffset):
        return Position(
            x=max(canvas_w - elem_w, 0) // 2,
            y=max(canvas_h - elem_h, 0) // 2,
        )

    raise TypeError(f"unsupported offset mode: {offset!r}")
