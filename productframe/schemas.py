from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from productframe.canvas.types import (
    F32_MAX,
    I64_MAX,
    I64_MIN,
    U32_MAX,
    CenterOffset,
    HeightResize,
    PercentOffset,
    PixelOffset,
    ScaleResize,
    WidthResize,
)


def _require_finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError("value must be a finite number")
    return value


class WidthResizeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["Width"]
    value: int = Field(ge=0, le=U32_MAX)

    def to_mode(self) -> WidthResize:
        return WidthResize(target=self.value)


class HeightResizeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["Height"]
    value: int = Field(ge=0, le=U32_MAX)

    def to_mode(self) -> HeightResize:
        return HeightResize(target=self.value)


class ScaleResizeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["Scale"]
    value: float = Field(ge=-F32_MAX, le=F32_MAX)

    @field_validator("value")
    @classmethod
    def check_finite_factor(cls, value: float) -> float:
        return _require_finite(value)

    def to_mode(self) -> ScaleResize:
        return ScaleResize(factor=self.value)


class PixelOffsetRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["Pixel"]
    value: tuple[
        Annotated[int, Field(ge=I64_MIN, le=I64_MAX)],
        Annotated[int, Field(ge=I64_MIN, le=I64_MAX)],
    ]

    def to_mode(self) -> PixelOffset:
        return PixelOffset(x=self.value[0], y=self.value[1])


class PercentOffsetRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["Percent"]
    value: tuple[
        Annotated[float, Field(ge=-F32_MAX, le=F32_MAX)],
        Annotated[float, Field(ge=-F32_MAX, le=F32_MAX)],
    ]

    @field_validator("value")
    @classmethod
    def check_finite_pair(cls, value: tuple[float, float]) -> tuple[float, float]:
        for item in value:
            _require_finite(item)
        return value

    def to_mode(self) -> PercentOffset:
        return PercentOffset(x=self.value[0], y=self.value[1])


class CenterOffsetRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["Center"]
    value: Any = None

    def to_mode(self) -> CenterOffset:
        return CenterOffset()


ResizeModeRequest = Annotated[
    Union[WidthResizeRequest, HeightResizeRequest, ScaleResizeRequest],
    Field(discriminator="type"),
]
OffsetModeRequest = Annotated[
    Union[PixelOffsetRequest, PercentOffsetRequest, CenterOffsetRequest],
    Field(discriminator="type"),
]

resize_mode_adapter: TypeAdapter[Any] = TypeAdapter(ResizeModeRequest)
offset_mode_adapter: TypeAdapter[Any] = TypeAdapter(OffsetModeRequest)


class CompositeOptionsRequest(BaseModel):
    """Loosely-typed options as sent by callers (camelCase or snake_case)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    background_color: Any = Field(alias="backgroundColor")
    resize_mode: Any = Field(default=None, alias="resizeMode")
    offset_mode: Any = Field(default=None, alias="offsetMode")


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    app_name: str
    env: str
