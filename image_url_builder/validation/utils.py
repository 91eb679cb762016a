"""Validation utility functions (SRP: helper functions for validation checks)"""
import math
from typing import Any

from image_url_builder.core import INTEGER_TYPES, NUMBER_TYPES, BOOL_TYPES


class ValidationUtils:
    """Utility class for common validation checks"""

    @staticmethod
    def is_number(value: Any) -> bool:
        """
        Check if value is a real number (Python or numpy). Booleans are rejected.

        Args:
            value: Value to check

        Returns:
            True for int and float values
        """
        return isinstance(value, NUMBER_TYPES) and not isinstance(value, BOOL_TYPES)

    @staticmethod
    def is_integer(value: Any) -> bool:
        """
        Check if value is a finite number without fractional part (2 and 2.0 both pass).

        Args:
            value: Value to check

        Returns:
            True if value is integral
        """
        if not ValidationUtils.is_number(value):
            return False
        if isinstance(value, INTEGER_TYPES):
            return True
        return math.isfinite(value) and float(value).is_integer()

    @staticmethod
    def format_bound(value: float) -> str:
        """Format a bound for messages ("inf" for unbounded)"""
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        return str(int(value)) if float(value).is_integer() else str(value)
