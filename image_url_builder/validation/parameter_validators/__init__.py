"""Parameter validators for individual parameter types"""
from image_url_builder.validation.parameter_validators.integer_range_validator import IntegerRangeValidator
from image_url_builder.validation.parameter_validators.rotation_validator import RotationValidator
from image_url_builder.validation.parameter_validators.hex_color_validator import HexColorValidator
from image_url_builder.validation.parameter_validators.rect_validator import RectValidator

__all__ = [
    "IntegerRangeValidator",
    "RotationValidator",
    "HexColorValidator",
    "RectValidator",
]
