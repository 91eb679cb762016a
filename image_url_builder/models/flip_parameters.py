from dataclasses import dataclass
from typing import Optional

from image_url_builder.core import ParameterConflictError, ParameterName


@dataclass(frozen=True)
class FlipParameters:
    """Mirror the image horizontally and/or vertically"""
    horizontal: Optional[bool] = None
    vertical: Optional[bool] = None

    def __post_init__(self):
        if self.horizontal is None and self.vertical is None:
            raise ParameterConflictError(
                [ParameterName.FLIP.value],
                "At least one of horizontal or vertical must be set",
            )
