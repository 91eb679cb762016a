"""Validator for integer parameters with bounds (SRP: validates only integer ranges)"""
import math
from typing import Any, Dict, Optional
from image_url_builder.validation.base import BaseValidator, ValidationResult, ValidationError
from image_url_builder.validation.enums import ValidationErrorType
from image_url_builder.validation.utils import ValidationUtils


class IntegerRangeValidator(BaseValidator):
    """Validates that a value is an integer within [min_value, max_value]"""

    def __init__(self, parameter_name: str, min_value: float, max_value: float = math.inf):
        """
        Initialize integer range validator.

        Args:
            parameter_name: Field path of the parameter being validated
            min_value: Minimum allowed value (inclusive)
            max_value: Maximum allowed value (inclusive), inf for no upper bound
        """
        self._parameter_name = parameter_name
        self._min_value = min_value
        self._max_value = max_value

    def _describe_contract(self) -> str:
        if math.isinf(self._max_value):
            return f"an integer >= {ValidationUtils.format_bound(self._min_value)}"
        return (
            f"an integer between {ValidationUtils.format_bound(self._min_value)} "
            f"and {ValidationUtils.format_bound(self._max_value)}"
        )

    def _describe_remediation(self) -> str:
        if math.isinf(self._max_value):
            return f"rounded to the nearest integer and raised to at least {ValidationUtils.format_bound(self._min_value)}"
        return (
            f"rounded to the nearest integer and clamped to "
            f"[{ValidationUtils.format_bound(self._min_value)}, {ValidationUtils.format_bound(self._max_value)}]"
        )

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate integer range.

        Args:
            value: Value to validate
            context: Optional context (unused)

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()

        # Type check
        if not ValidationUtils.is_number(value):
            error = ValidationError(
                error_type=ValidationErrorType.INVALID_TYPE,
                message=f"{self._parameter_name} must be {self._describe_contract()}, got {type(value).__name__} {value!r}",
                parameter_name=self._parameter_name
            )
            result.add_error(error)
            return result

        # Integer and range check, one diagnostic per parameter
        if not ValidationUtils.is_integer(value) or not (self._min_value <= value <= self._max_value):
            error = ValidationError(
                error_type=ValidationErrorType.INVALID_RANGE,
                message=(
                    f"{self._parameter_name} must be {self._describe_contract()}, got {value}. "
                    f"The value will be {self._describe_remediation()}"
                ),
                parameter_name=self._parameter_name
            )
            result.add_error(error)

        return result
