"""Request models using Pydantic for parsing plain mappings (e.g. decoded JSON) into TransformParameters"""
from typing import Any, Literal, Mapping, Optional, Union
from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, ValidationError

from image_url_builder.core import (
    ImageFormat,
    InvalidArgumentError,
    ParameterConflictError,
    ParameterName,
)
from image_url_builder.models import (
    BlurParameters,
    FitInMode,
    FlipParameters,
    FocalPointMode,
    PlainMode,
    Rect,
    ResizeParameters,
    TransformParameters,
)

# Range checks are left to the validator; only the shape is enforced here
Number = Union[StrictInt, StrictFloat]


class RectSchema(BaseModel):
    """Rectangle request model"""
    left: Number
    top: Number
    right: Number
    bottom: Number

    class Config:
        extra = "forbid"

    def to_rect(self) -> Rect:
        return Rect(left=self.left, top=self.top, right=self.right, bottom=self.bottom)


class BlurSchema(BaseModel):
    """Blur request model"""
    radius: Number
    sigma: Optional[Number] = None

    class Config:
        extra = "forbid"

    def to_parameters(self) -> BlurParameters:
        return BlurParameters(radius=self.radius, sigma=self.sigma)


class FlipSchema(BaseModel):
    """Flip request model"""
    horizontal: Optional[StrictBool] = None
    vertical: Optional[StrictBool] = None

    class Config:
        extra = "forbid"

    def to_parameters(self) -> FlipParameters:
        return FlipParameters(horizontal=self.horizontal, vertical=self.vertical)


class ResizeSchema(BaseModel):
    """
    Resize request model.

    Accepts the flat shape used by front-end callers, e.g.
    {"width": 300, "height": 200, "fitIn": true, "fill": "CCCCCC"}, and turns
    it into a ResizeParameters with an explicit mode.
    """
    height: Optional[Number] = None
    width: Optional[Number] = None
    fit_in: Optional[StrictBool] = Field(default=None, alias="fitIn")
    fill: Optional[str] = None
    focal_point: Optional[Union[Literal["smart"], RectSchema]] = Field(default=None, alias="focalPoint")

    class Config:
        extra = "forbid"
        populate_by_name = True

    def to_parameters(self) -> ResizeParameters:
        """
        Build ResizeParameters

        Raises:
            ParameterConflictError: If fill is set without fit-in, or fit-in is combined with a focal point
        """
        if self.fit_in:
            if self.focal_point is not None:
                raise ParameterConflictError(
                    [ParameterName.RESIZE_FIT_IN.value, ParameterName.RESIZE_FOCAL_POINT.value],
                    "Fit-in cannot be combined with a focal point",
                )
            mode = FitInMode(fill=self.fill)
        elif self.fill is not None:
            raise ParameterConflictError(
                [ParameterName.RESIZE_FILL.value, ParameterName.RESIZE_FIT_IN.value],
                "Fill requires fit-in",
            )
        elif isinstance(self.focal_point, RectSchema):
            mode = FocalPointMode(self.focal_point.to_rect())
        elif self.focal_point is not None:
            mode = FocalPointMode(self.focal_point)
        else:
            mode = PlainMode()

        return ResizeParameters(height=self.height, width=self.width, mode=mode)


class TransformRequest(BaseModel):
    """
    Transform request model for type safety and validation.

    Out-of-range numbers are accepted here and reported later as diagnostics.
    """
    format: Optional[ImageFormat] = None
    quality: Optional[Number] = None
    rotate: Optional[Number] = None
    grayscale: Optional[StrictBool] = None
    blur: Optional[BlurSchema] = None
    flip: Optional[FlipSchema] = None
    brightness: Optional[Number] = None
    resize: Optional[ResizeSchema] = None
    crop: Optional[RectSchema] = None

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "format": "webp",
                "quality": 80,
                "resize": {"width": 1200, "height": 630, "focalPoint": "smart"},
                "blur": {"radius": 4, "sigma": 2},
            }
        }

    def to_parameters(self) -> TransformParameters:
        """
        Build TransformParameters

        Raises:
            ParameterConflictError: If the request combines exclusive parameters
        """
        return TransformParameters(
            format=self.format,
            quality=self.quality,
            rotate=self.rotate,
            grayscale=self.grayscale,
            blur=self.blur.to_parameters() if self.blur else None,
            flip=self.flip.to_parameters() if self.flip else None,
            brightness=self.brightness,
            resize=self.resize.to_parameters() if self.resize else None,
            crop=self.crop.to_rect() if self.crop else None,
        )


def parse_transform_parameters(data: Mapping[str, Any]) -> TransformParameters:
    """
    Parse a plain mapping into TransformParameters.

    Args:
        data: Mapping with camelCase or snake_case keys

    Returns:
        TransformParameters instance

    Raises:
        InvalidArgumentError: If the mapping has unknown keys or wrongly typed values
        ParameterConflictError: If the mapping combines exclusive parameters
    """
    try:
        request = TransformRequest.model_validate(dict(data))
    except ValidationError as e:
        raise InvalidArgumentError("parameters", dict(data), str(e)) from e
    return request.to_parameters()
