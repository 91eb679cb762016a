"""Rectangle in image pixel space (top-left origin, growing right/down)"""
from dataclasses import dataclass
from typing import Any

from image_url_builder.core import RectSide


@dataclass(frozen=True)
class Rect:
    """Four pixel coordinates used by crop and focal point"""
    left: float
    top: float
    right: float
    bottom: float

    def get(self, side: RectSide) -> Any:
        """Get coordinate by side"""
        return getattr(self, side.value)
