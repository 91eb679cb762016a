"""
Transform Parameters Model

The full set of transformations requested for one image. Values are kept raw:
range problems are reported by the validator and clamped by the serializer.
"""
from dataclasses import dataclass
from typing import Optional, Union

from image_url_builder.core import (
    ImageFormat,
    ParameterName,
    ParameterConflictError,
    InvalidArgumentError,
)
from image_url_builder.models.blur_parameters import BlurParameters
from image_url_builder.models.flip_parameters import FlipParameters
from image_url_builder.models.rect import Rect
from image_url_builder.models.resize_parameters import ResizeParameters


@dataclass(frozen=True)
class TransformParameters:
    """Transformations for a single image request. resize and crop are exclusive."""
    format: Optional[Union[ImageFormat, str]] = None
    quality: Optional[float] = None
    rotate: Optional[float] = None
    grayscale: Optional[bool] = None
    blur: Optional[BlurParameters] = None
    flip: Optional[FlipParameters] = None
    brightness: Optional[float] = None
    resize: Optional[ResizeParameters] = None
    crop: Optional[Rect] = None

    def __post_init__(self):
        if self.resize is not None and self.crop is not None:
            raise ParameterConflictError(
                [ParameterName.RESIZE.value, ParameterName.CROP.value],
                "Resize and crop cannot be combined in one request",
            )

        if self.format is not None and not isinstance(self.format, ImageFormat):
            try:
                object.__setattr__(self, "format", ImageFormat(self.format))
            except ValueError:
                raise InvalidArgumentError(
                    ParameterName.FORMAT.value,
                    self.format,
                    f"expected one of {', '.join(f.value for f in ImageFormat)}",
                ) from None
