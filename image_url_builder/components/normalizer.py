import math
from typing import Any, Optional
import numpy as np

from image_url_builder.core import InvalidArgumentError, INTEGER_TYPES, NUMBER_TYPES, BOOL_TYPES


class ParameterNormalizer:
    """
    Maps raw numeric parameters to the closest value the image service accepts.

    Rounds half up (like JavaScript's Math.round) and clamps into the bounds.
    Silent: reporting is the validator's job.
    """

    @staticmethod
    def normalize(lower_bound: float, upper_bound: float, value: Any,
                  parameter_name: Optional[str] = None) -> int:
        """
        Round value to the nearest integer and clamp it into [lower_bound, upper_bound]

        Args:
            lower_bound: Smallest accepted value (may be -inf)
            upper_bound: Largest accepted value (may be inf)
            value: Raw numeric value
            parameter_name: Parameter name used in error messages

        Returns:
            Normalized integer

        Raises:
            InvalidArgumentError: If value is not a finite number
        """
        name = parameter_name or "value"

        if isinstance(value, BOOL_TYPES) or not isinstance(value, NUMBER_TYPES):
            raise InvalidArgumentError(name, value, f"expected a number, got {type(value).__name__}")

        # Integers are exact at any size; only floats are rounded
        if isinstance(value, INTEGER_TYPES):
            rounded = int(value)
        elif not np.isfinite(value):
            raise InvalidArgumentError(name, value, "expected a finite number")
        else:
            rounded = math.floor(float(value) + 0.5)

        return int(max(lower_bound, min(upper_bound, rounded)))

    @staticmethod
    def round(value: Any, parameter_name: Optional[str] = None) -> int:
        """Round to the nearest integer without clamping"""
        return ParameterNormalizer.normalize(-math.inf, math.inf, value, parameter_name)


def normalize(lower_bound: float, upper_bound: float, value: Any) -> int:
    """Module-level shortcut for ParameterNormalizer.normalize"""
    return ParameterNormalizer.normalize(lower_bound, upper_bound, value)
