"""
Resize Parameters Model

A resize sets a target height and/or width. When both are set the resize can
additionally run in one of two modes:

- fit-in: pad to the target box instead of cropping, optionally with a fill color
- focal point: crop around a rectangle of interest, or let the service pick one ("smart")
"""
from dataclasses import dataclass, field
from typing import Optional, Union

from image_url_builder.core import (
    ParameterConflictError,
    InvalidArgumentError,
    ParameterName,
    SegmentToken,
)
from image_url_builder.models.rect import Rect

SMART = SegmentToken.SMART.value


@dataclass(frozen=True)
class PlainMode:
    """Plain resize, no fit-in and no focal point"""
    pass


@dataclass(frozen=True)
class FitInMode:
    """Pad to the target box; fill is a 6 or 8 digit hex color"""
    fill: Optional[str] = None


@dataclass(frozen=True)
class FocalPointMode:
    """Crop around a rectangle of interest, or "smart" detection"""
    focal_point: Union[Rect, str]

    def __post_init__(self):
        if self.focal_point != SMART and not isinstance(self.focal_point, Rect):
            raise InvalidArgumentError(
                ParameterName.RESIZE_FOCAL_POINT.value,
                self.focal_point,
                f"expected a Rect or '{SMART}'",
            )

    @property
    def is_smart(self) -> bool:
        return self.focal_point == SMART


ResizeMode = Union[PlainMode, FitInMode, FocalPointMode]


@dataclass(frozen=True)
class ResizeParameters:
    """Target dimensions plus resize mode"""
    height: Optional[float] = None
    width: Optional[float] = None
    mode: ResizeMode = field(default_factory=PlainMode)

    def __post_init__(self):
        if self.height is None and self.width is None:
            raise ParameterConflictError(
                [ParameterName.RESIZE_HEIGHT.value, ParameterName.RESIZE_WIDTH.value],
                "At least one of height or width must be set",
            )

        if not isinstance(self.mode, PlainMode) and not self.has_both_dimensions:
            raise ParameterConflictError(
                [ParameterName.RESIZE_HEIGHT.value, ParameterName.RESIZE_WIDTH.value],
                "Fit-in, fill and focal point require both height and width",
            )

    @property
    def has_both_dimensions(self) -> bool:
        return self.height is not None and self.width is not None

    @property
    def fit_in(self) -> bool:
        return isinstance(self.mode, FitInMode)

    @property
    def fill(self) -> Optional[str]:
        if isinstance(self.mode, FitInMode):
            return self.mode.fill
        return None

    @property
    def focal_point(self) -> Optional[Union[Rect, str]]:
        if isinstance(self.mode, FocalPointMode):
            return self.mode.focal_point
        return None

    @property
    def focal_rect(self) -> Optional[Rect]:
        """Focal point rectangle, None when absent or smart"""
        focal_point = self.focal_point
        return focal_point if isinstance(focal_point, Rect) else None

    @property
    def is_smart(self) -> bool:
        return isinstance(self.mode, FocalPointMode) and self.mode.is_smart
