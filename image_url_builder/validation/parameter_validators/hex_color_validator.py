"""Validator for hex colors (SRP: validates only color strings)"""
import re
from typing import Any, Dict, Optional
from image_url_builder.validation.base import BaseValidator, ValidationResult, ValidationError
from image_url_builder.validation.enums import ValidationErrorType

# RRGGBB or RRGGBBAA, no leading "#"; used with fullmatch
HEX_COLOR_PATTERN = re.compile(r"[0-9a-f]{6}|[0-9a-f]{8}", re.IGNORECASE)


class HexColorValidator(BaseValidator):
    """Validates 6 or 8 digit hex colors"""

    def __init__(self, parameter_name: str):
        self._parameter_name = parameter_name

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate hex color.

        Args:
            value: Value to validate
            context: Optional context (unused)

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()

        if not isinstance(value, str) or not HEX_COLOR_PATTERN.fullmatch(value):
            error = ValidationError(
                error_type=ValidationErrorType.INVALID_FORMAT,
                message=(
                    f"{self._parameter_name} must be a hex color of exactly 6 or 8 hex digits "
                    f"(e.g. 'CCCCCC'), got {value!r}. The value will be sent unchanged"
                ),
                parameter_name=self._parameter_name
            )
            result.add_error(error)

        return result
