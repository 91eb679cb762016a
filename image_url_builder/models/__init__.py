from image_url_builder.models.rect import Rect
from image_url_builder.models.blur_parameters import BlurParameters
from image_url_builder.models.flip_parameters import FlipParameters
from image_url_builder.models.resize_parameters import (
    ResizeParameters,
    ResizeMode,
    PlainMode,
    FitInMode,
    FocalPointMode,
    SMART,
)
from image_url_builder.models.transform_parameters import TransformParameters
from image_url_builder.models.image_reference import ImageReference

__all__ = [
    "Rect",
    "BlurParameters",
    "FlipParameters",
    "ResizeParameters",
    "ResizeMode",
    "PlainMode",
    "FitInMode",
    "FocalPointMode",
    "SMART",
    "TransformParameters",
    "ImageReference",
]
