from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Union

from productframe.errors import InvalidArgument

U32_MAX = 2**32 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
F32_MAX = 3.4028234663852886e38


@dataclass(frozen=True, slots=True)
class WidthResize:
    target: int


@dataclass(frozen=True, slots=True)
class HeightResize:
    target: int


@dataclass(frozen=True, slots=True)
class ScaleResize:
    factor: float


ResizeMode = Union[WidthResize, HeightResize, ScaleResize]


@dataclass(frozen=True, slots=True)
class PixelOffset:
    """Absolute canvas pixel at which the element's center is placed."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class PercentOffset:
    """Canvas-relative center point; 0-100 nominal, not clamped."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CenterOffset:
    pass


OffsetMode = Union[PixelOffset, PercentOffset, CenterOffset]


@dataclass(frozen=True, slots=True)
class Position:
    """Top-left corner of a placed element; may lie outside the canvas."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class BackgroundColor:
    r: int
    g: int
    b: int
    a: int

    @classmethod
    def from_sequence(cls, raw: Sequence[int] | bytes | bytearray) -> BackgroundColor:
        if isinstance(raw, BackgroundColor):
            return raw
        if isinstance(raw, str):
            raise InvalidArgument("background_color must be a sequence of 4 bytes")
        try:
            values = list(raw)
        except TypeError as exc:
            raise InvalidArgument("background_color must be a sequence of 4 bytes") from exc
        if len(values) != 4:
            raise InvalidArgument(
                f"background_color must have exactly 4 bytes (RGBA), got {len(values)}"
            )
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise InvalidArgument(
                    f"background_color channels must be integers in 0..255, got {value!r}"
                )
        return cls(*values)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True, slots=True)
class CompositeOptions:
    background_color: BackgroundColor
    resize_mode: ResizeMode | None = None
    offset_mode: OffsetMode = field(default_factory=CenterOffset)
