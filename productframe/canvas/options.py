from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from productframe.canvas.types import (
    BackgroundColor,
    CenterOffset,
    CompositeOptions,
    HeightResize,
    OffsetMode,
    PercentOffset,
    PixelOffset,
    ResizeMode,
    ScaleResize,
    WidthResize,
)
from productframe.errors import InvalidArgument
from productframe.schemas import (
    CompositeOptionsRequest,
    offset_mode_adapter,
    resize_mode_adapter,
)

_RESIZE_TYPES = (WidthResize, HeightResize, ScaleResize)
_OFFSET_TYPES = (PixelOffset, PercentOffset, CenterOffset)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in error["loc"])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


def parse_resize_mode(raw: Any) -> ResizeMode | None:
    if raw is None:
        return None
    if isinstance(raw, _RESIZE_TYPES):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidArgument(f"resize_mode must be an object with 'type' and 'value', got {raw!r}")
    try:
        request = resize_mode_adapter.validate_python(raw)
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid resize_mode: {_describe(exc)}") from exc
    return request.to_mode()


def parse_offset_mode(raw: Any) -> OffsetMode:
    if raw is None:
        return CenterOffset()
    if isinstance(raw, _OFFSET_TYPES):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidArgument(f"offset_mode must be an object with 'type' and 'value', got {raw!r}")
    try:
        request = offset_mode_adapter.validate_python(raw)
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid offset_mode: {_describe(exc)}") from exc
    return request.to_mode()


def parse_background_color(raw: Any) -> BackgroundColor:
    if raw is None:
        raise InvalidArgument("background_color is required")
    return BackgroundColor.from_sequence(raw)


def parse_options(raw: Mapping[str, Any] | CompositeOptions) -> CompositeOptions:
    """Validate a loosely-typed options mapping once, at the boundary."""
    if isinstance(raw, CompositeOptions):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidArgument(f"options must be an object, got {type(raw).__name__}")
    try:
        request = CompositeOptionsRequest.model_validate(raw)
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid options: {_describe(exc)}") from exc

    return CompositeOptions(
        background_color=parse_background_color(request.background_color),
        resize_mode=parse_resize_mode(request.resize_mode),
        offset_mode=parse_offset_mode(request.offset_mode),
    )
