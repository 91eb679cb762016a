"""Validator for rectangles (SRP: validates rectangle coordinates)"""
from typing import Any, Dict, Optional, Sequence
from image_url_builder.core import ParameterBounds, RectSide, RECT_SIDES
from image_url_builder.validation.base import BaseValidator, ValidationResult, ValidationError
from image_url_builder.validation.enums import ValidationErrorType
from image_url_builder.validation.parameter_validators.integer_range_validator import IntegerRangeValidator


class RectValidator(BaseValidator):
    """Validates each coordinate of a rectangle as a non-negative integer"""

    def __init__(self, parameter_name: str, order: Sequence[RectSide] = RECT_SIDES):
        """
        Initialize rectangle validator.

        Args:
            parameter_name: Field path of the rectangle (e.g. "crop")
            order: Order in which coordinates are checked and reported
        """
        self._parameter_name = parameter_name
        self._order = tuple(order)
        self._validators = {
            side: IntegerRangeValidator(
                f"{parameter_name}.{side.value}",
                min_value=ParameterBounds.DIMENSION_MIN,
                max_value=ParameterBounds.DIMENSION_MAX,
            )
            for side in self._order
        }

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        result = ValidationResult()

        if not all(hasattr(value, side.value) for side in self._order):
            error = ValidationError(
                error_type=ValidationErrorType.INVALID_TYPE,
                message=f"{self._parameter_name} must be a rectangle with left, top, right and bottom, got {value!r}",
                parameter_name=self._parameter_name
            )
            result.add_error(error)
            return result

        for side in self._order:
            result.merge(self._validators[side].validate(getattr(value, side.value)))

        return result
