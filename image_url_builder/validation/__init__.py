"""Validation module for transform parameters"""
from image_url_builder.validation.base import BaseValidator, ValidationResult, ValidationError
from image_url_builder.validation.enums import ValidationErrorType
from image_url_builder.validation.utils import ValidationUtils
from image_url_builder.validation.request_validators import TransformParametersValidator, validate

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "ValidationError",
    "ValidationErrorType",
    "ValidationUtils",
    "TransformParametersValidator",
    "validate",
]
