"""Validator for rotation angles (SRP: validates only rotation values)"""
from typing import Any, Dict, Optional
from image_url_builder.core import ParameterBounds
from image_url_builder.validation.base import BaseValidator, ValidationResult, ValidationError
from image_url_builder.validation.enums import ValidationErrorType
from image_url_builder.validation.utils import ValidationUtils


class RotationValidator(BaseValidator):
    """Validates rotation angles in degrees: integer multiples of the rotation step, any sign"""

    def __init__(self, parameter_name: str, step: int = ParameterBounds.ROTATION_STEP):
        """
        Initialize rotation validator.

        Args:
            parameter_name: Field path of the parameter being validated
            step: Angle every rotation must be a multiple of
        """
        self._parameter_name = parameter_name
        self._step = step

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        result = ValidationResult()

        if not ValidationUtils.is_number(value):
            error = ValidationError(
                error_type=ValidationErrorType.INVALID_TYPE,
                message=f"{self._parameter_name} must be an integer multiple of {self._step}, got {type(value).__name__} {value!r}",
                parameter_name=self._parameter_name
            )
            result.add_error(error)
            return result

        if not ValidationUtils.is_integer(value) or value % self._step != 0:
            error = ValidationError(
                error_type=ValidationErrorType.INVALID_MULTIPLE,
                message=(
                    f"{self._parameter_name} must be an integer multiple of {self._step}, got {value}. "
                    f"The value will be rounded to the nearest integer and sent as is"
                ),
                parameter_name=self._parameter_name
            )
            result.add_error(error)

        return result
