from image_url_builder.core.enums import (
    ImageFormat,
    SegmentToken,
    FilterName,
    ParameterName,
    RectSide,
    RECT_SIDES,
    CROP_VALIDATION_ORDER,
    ParameterBounds,
    LogLevel,
)
from image_url_builder.core.types import INTEGER_TYPES, NUMBER_TYPES, BOOL_TYPES
from image_url_builder.core.exceptions import (
    ImageUrlBuilderException,
    ParameterConflictError,
    InvalidArgumentError,
)

__all__ = [
    "ImageFormat",
    "SegmentToken",
    "FilterName",
    "ParameterName",
    "RectSide",
    "RECT_SIDES",
    "CROP_VALIDATION_ORDER",
    "ParameterBounds",
    "LogLevel",
    "INTEGER_TYPES",
    "NUMBER_TYPES",
    "BOOL_TYPES",
    "ImageUrlBuilderException",
    "ParameterConflictError",
    "InvalidArgumentError",
]
