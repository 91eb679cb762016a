"""Build image service URLs from structured transform parameters"""
from image_url_builder.api import build_image_url
from image_url_builder.components import normalize
from image_url_builder.core import (
    ImageFormat,
    ImageUrlBuilderException,
    InvalidArgumentError,
    ParameterConflictError,
)
from image_url_builder.models import (
    BlurParameters,
    FitInMode,
    FlipParameters,
    FocalPointMode,
    PlainMode,
    Rect,
    ResizeParameters,
    SMART,
    TransformParameters,
)
from image_url_builder.validation import validate

__all__ = [
    "build_image_url",
    "normalize",
    "validate",
    "ImageFormat",
    "ImageUrlBuilderException",
    "InvalidArgumentError",
    "ParameterConflictError",
    "BlurParameters",
    "FitInMode",
    "FlipParameters",
    "FocalPointMode",
    "PlainMode",
    "Rect",
    "ResizeParameters",
    "SMART",
    "TransformParameters",
]
