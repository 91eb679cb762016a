"""Validator for transform parameters (SRP: validates only a TransformParameters bag)"""
from typing import Any, Dict, List, Optional
from image_url_builder.core import ParameterBounds, ParameterName, CROP_VALIDATION_ORDER
from image_url_builder.models import TransformParameters
from image_url_builder.validation.base import BaseValidator, ValidationResult, ValidationError
from image_url_builder.validation.enums import ValidationErrorType
from image_url_builder.validation.parameter_validators import (
    IntegerRangeValidator,
    RotationValidator,
    HexColorValidator,
    RectValidator,
)


class TransformParametersValidator(BaseValidator):
    """
    Collects one diagnostic per out-of-contract field of a TransformParameters.

    Works on raw values, never mutates them and never raises for bad values.
    Fields are checked in this order: quality, rotate, brightness, blur
    (radius, sigma), resize (height, width, fill, focal point), crop.
    """

    def __init__(self):
        """Initialize transform parameters validator with parameter validators"""
        self._quality_validator = IntegerRangeValidator(
            ParameterName.QUALITY.value, *ParameterBounds.quality()
        )
        self._rotate_validator = RotationValidator(ParameterName.ROTATE.value)
        self._brightness_validator = IntegerRangeValidator(
            ParameterName.BRIGHTNESS.value, *ParameterBounds.brightness()
        )
        self._blur_radius_validator = IntegerRangeValidator(
            ParameterName.BLUR_RADIUS.value, *ParameterBounds.blur()
        )
        self._blur_sigma_validator = IntegerRangeValidator(
            ParameterName.BLUR_SIGMA.value, *ParameterBounds.blur()
        )
        self._height_validator = IntegerRangeValidator(
            ParameterName.RESIZE_HEIGHT.value, *ParameterBounds.dimension()
        )
        self._width_validator = IntegerRangeValidator(
            ParameterName.RESIZE_WIDTH.value, *ParameterBounds.dimension()
        )
        self._fill_validator = HexColorValidator(ParameterName.RESIZE_FILL.value)
        self._focal_point_validator = RectValidator(ParameterName.RESIZE_FOCAL_POINT.value)
        self._crop_validator = RectValidator(ParameterName.CROP.value, order=CROP_VALIDATION_ORDER)

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate transform parameters.

        Args:
            value: TransformParameters to validate
            context: Optional context (unused)

        Returns:
            ValidationResult with one error per invalid field
        """
        result = ValidationResult()

        # Type check - must be a TransformParameters
        if not isinstance(value, TransformParameters):
            error = ValidationError(
                error_type=ValidationErrorType.INVALID_TYPE,
                message=f"Parameters must be TransformParameters, got {type(value).__name__}",
                parameter_name="parameters"
            )
            result.add_error(error)
            return result

        if value.quality is not None:
            result.merge(self._quality_validator.validate(value.quality))

        if value.rotate is not None:
            result.merge(self._rotate_validator.validate(value.rotate))

        if value.brightness is not None:
            result.merge(self._brightness_validator.validate(value.brightness))

        if value.blur is not None:
            result.merge(self._blur_radius_validator.validate(value.blur.radius))
            if value.blur.sigma is not None:
                result.merge(self._blur_sigma_validator.validate(value.blur.sigma))

        if value.resize is not None:
            self._validate_resize(value, result)

        if value.crop is not None:
            result.merge(self._crop_validator.validate(value.crop))

        return result

    def _validate_resize(self, value: TransformParameters, result: ValidationResult) -> None:
        resize = value.resize

        if resize.height is not None:
            result.merge(self._height_validator.validate(resize.height))
        if resize.width is not None:
            result.merge(self._width_validator.validate(resize.width))

        # Fill and focal point only exist on two-dimensional resizes
        if not resize.has_both_dimensions:
            return

        if resize.fill is not None:
            result.merge(self._fill_validator.validate(resize.fill))

        if resize.focal_rect is not None:
            result.merge(self._focal_point_validator.validate(resize.focal_rect))


def validate(params: TransformParameters) -> List[str]:
    """
    Get diagnostics for transform parameters.

    Args:
        params: Raw transform parameters

    Returns:
        One human-readable message per invalid field, empty when all fields are valid
    """
    return TransformParametersValidator().validate(params).messages
